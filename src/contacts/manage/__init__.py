from .transaction import management_transaction

__all__ = ['management_transaction']
