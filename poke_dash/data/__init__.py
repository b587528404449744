"""Display metadata shared by the dashboard surfaces."""
