from voicenote_common.infrastructure.interfaces.storage import MediaStorage

__all__ = ["MediaStorage"]
