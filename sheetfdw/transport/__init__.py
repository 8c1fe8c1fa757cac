"""HTTP transport collaborator."""

from sheetfdw.transport.http import HttpTransport, Method, Request, Response

__all__ = ["HttpTransport", "Method", "Request", "Response"]
