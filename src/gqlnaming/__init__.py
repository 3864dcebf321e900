"""gqlnaming — file-path-driven naming conventions for GraphQL documents."""

__version__ = "0.1.0"
