from salesview.models.transaction import Transaction

__all__ = ["Transaction"]
