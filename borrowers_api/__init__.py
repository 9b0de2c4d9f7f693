# Borrowers API package.
# HTTP service (app.py) and MCP tool server (tools_server.py) over one dataset.

__version__ = "0.1.0"
