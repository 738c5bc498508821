"""Stock dashboard service: in-memory inventory with AI-assisted analysis."""
