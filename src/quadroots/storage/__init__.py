from quadroots.storage._storage import DEFAULT_DOCUMENT, read_document, write_document

__all__ = ["DEFAULT_DOCUMENT", "read_document", "write_document"]
