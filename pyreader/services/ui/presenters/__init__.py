from __future__ import annotations

from .reader_presenter import IReaderView, ReaderPresenter

__all__ = ["IReaderView", "ReaderPresenter"]
