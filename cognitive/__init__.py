"""Domain model for tags, attribute and entity definitions, attribute values, entities, links and users."""

__version__ = "0.6.0"