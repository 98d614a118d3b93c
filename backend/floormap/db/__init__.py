"""Database Metadata: the declarative Base shared by models, alembic and test create_all."""
