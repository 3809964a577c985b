"""Quickstart: automatic wiring from constructor type hints.

Bind an interface once, resolve the top-level service, and let bindwire build
the rest of the chain.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from bindwire import Container


class Database(ABC):
    @abstractmethod
    def host(self) -> str: ...


class PostgresDatabase(Database):
    def host(self) -> str:
        return "localhost"


class UserRepository:
    def __init__(self, database: Database) -> None:
        self.database = database


class UserService:
    def __init__(self, repository: UserRepository, page_size: int = 20) -> None:
        self.repository = repository
        self.page_size = page_size


def main() -> None:
    container = Container()
    container.singleton(Database, PostgresDatabase)

    service = container.make(UserService)
    print(f"db_host={service.repository.database.host()}")  # => db_host=localhost
    print(f"page_size={service.page_size}")  # => page_size=20

    tuned = container.make(UserService, {"page_size": 50})
    print(f"tuned_page_size={tuned.page_size}")  # => tuned_page_size=50

    same_db = tuned.repository.database is service.repository.database
    print(f"shared_database={same_db}")  # => shared_database=True


if __name__ == "__main__":
    main()
