"""Infrastructure — database session management and logging setup.

Invariants:
    - Single async engine per process (initialized via init_db, closed via close_db)
    - Logging configured once per process (setup_logging)
"""
