"""Pixico: AI prompt library and blog with live search and an AI assistant."""
