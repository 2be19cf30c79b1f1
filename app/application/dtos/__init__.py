"""Application DTOs (read-models and write inputs). No ORM or presentation imports."""
