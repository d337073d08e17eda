from recall.boundary.storage.temp_files import TempFileStorage

__all__ = ["TempFileStorage"]
