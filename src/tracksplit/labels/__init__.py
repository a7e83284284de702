"""Label database construction and source association."""
