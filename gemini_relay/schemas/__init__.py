"""Pydantic Schemas — request/response bodies at the HTTP boundary."""
