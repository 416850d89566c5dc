from sqlrelate.utils import dispatch, logging, uuids

__all__ = ("dispatch", "logging", "uuids")
