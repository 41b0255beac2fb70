"""Finalize steps S01-S15. Each module registers one step via ``@step``."""
