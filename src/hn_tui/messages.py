from textual.message import Message


class AlertDismissRequested(Message):
    """The user asked to close the alert banner."""
