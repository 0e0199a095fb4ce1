"""Upstream parser collaborator."""

from ir_to_openapi.parser.runner import ParserError, ParserRunner

__all__ = ["ParserError", "ParserRunner"]
