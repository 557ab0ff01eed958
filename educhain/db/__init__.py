"""Database layer: engine, models, repositories."""
