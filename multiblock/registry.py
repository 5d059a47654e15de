# registry.py
# Maps a block's `blockname` tag to the class that renders it.
# Classes register with the @register decorator when multiblock.blocks is imported
# (see MultiblockConfig.ready).

from django.core.exceptions import ImproperlyConfigured

_BLOCK_CLASSES = {}


def register(blockname):
    def decorator(cls):
        existing = _BLOCK_CLASSES.get(blockname)
        if existing is not None and existing is not cls:
            raise ImproperlyConfigured(
                f"Block type '{blockname}' is already registered to {existing.__name__}."
            )
        cls.blockname = blockname
        _BLOCK_CLASSES[blockname] = cls
        return cls
    return decorator


def get_block_class(blockname):
    return _BLOCK_CLASSES.get(blockname)


def registered_blocknames():
    return sorted(_BLOCK_CLASSES)
