"""Qt integration for paperfold."""

from .session_bridge import EditorSessionBridge

__all__ = ['EditorSessionBridge']
