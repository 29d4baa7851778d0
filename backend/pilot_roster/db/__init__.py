"""Database Metadata: declarative Base shared by models and migrations."""
