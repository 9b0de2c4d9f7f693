# Data providers: where the borrowers collection comes from.

from .file_provider import FileBorrowerProvider
from .remote_provider import RemoteBorrowerProvider

__all__ = ["FileBorrowerProvider", "RemoteBorrowerProvider"]
