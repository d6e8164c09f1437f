"""
Client layer: transcript 상태 + relay 전송.

브라우저 UI 대신 터미널 REPL (cli.py) 제공.
"""

from .session import BackendError, ChatSession
from .state import ChatState

__all__ = ["BackendError", "ChatSession", "ChatState"]
