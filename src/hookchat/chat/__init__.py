from .controller import ChatController, PendingTurn, SendRejection

__all__ = ["ChatController", "PendingTurn", "SendRejection"]
