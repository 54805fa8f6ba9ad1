"""Configuration — pydantic section models, settings resolution, and logging."""
