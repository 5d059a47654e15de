# multiblock/exceptions.py
# Errors raised by the multiblock helpers. Store failures are not wrapped:
# anything from django.db (DatabaseError, IntegrityError) reaches the caller as is.

from django.core.exceptions import ObjectDoesNotExist


class MultiblockError(Exception):
    """Base class for multiblock errors."""


class NotFoundError(MultiblockError, ObjectDoesNotExist):
    """A block, context or other required record does not exist."""


class IntegrityFault(MultiblockError):
    """
    The context tree is malformed: a block context has no ancestor
    that is not itself a block context.
    """
