"""User storage that depends on a database abstraction, and a coupled variant."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Database(ABC):
    """Somewhere user records can be saved."""

    @abstractmethod
    def save(self, data: str) -> str:
        """Save ``data`` and return the statement that was executed."""


class MySQLDatabase(Database):
    def save(self, data):
        statement = f"Executing SQL Query: INSERT INTO users VALUES('{data}');"
        print(statement)
        return statement


class MongoDBDatabase(Database):
    def save(self, data):
        statement = f"Executing MongoDB Function: db.users.insert({{name: '{data}'}})"
        print(statement)
        return statement


class UserService:
    """Stores users in whichever database it is given."""

    def __init__(self, database: Database) -> None:
        self.database = database

    def store_user(self, user: str) -> str:
        return self.database.save(user)


class CoupledUserService:
    """Stores users through concrete databases it creates itself."""

    def __init__(self) -> None:
        self.sql_db = MySQLDatabase()
        self.mongo_db = MongoDBDatabase()

    def store_user_to_sql(self, user: str) -> str:
        return self.sql_db.save(user)

    def store_user_to_mongo(self, user: str) -> str:
        return self.mongo_db.save(user)