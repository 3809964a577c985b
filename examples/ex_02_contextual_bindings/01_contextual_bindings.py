"""Contextual bindings: give one consumer a different implementation.

``when(Consumer).needs(Dependency).give(Implementation)`` only applies while
``Consumer`` itself is being built. Primitive parameters are targeted with
``"$<parameter>"``.
"""

from __future__ import annotations

from bindwire import Container


class Storage:
    name = "storage"


class LocalStorage(Storage):
    name = "local"


class CloudStorage(Storage):
    name = "cloud"


class PhotoUploader:
    def __init__(self, storage: Storage, chunk_size: int) -> None:
        self.storage = storage
        self.chunk_size = chunk_size


class ReportArchiver:
    def __init__(self, storage: Storage) -> None:
        self.storage = storage


def main() -> None:
    container = Container()
    container.bind(Storage, LocalStorage)
    container.when(PhotoUploader).needs(Storage).give(CloudStorage)
    container.when(PhotoUploader).needs("$chunk_size").give(4096)

    uploader = container.make(PhotoUploader)
    archiver = container.make(ReportArchiver)

    print(f"uploader_storage={uploader.storage.name}")  # => uploader_storage=cloud
    print(f"uploader_chunk_size={uploader.chunk_size}")  # => uploader_chunk_size=4096
    print(f"archiver_storage={archiver.storage.name}")  # => archiver_storage=local


if __name__ == "__main__":
    main()
