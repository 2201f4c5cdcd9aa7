from pymongo.database import Database
from pymongo import MongoClient
from fastapi import Request


def get_database(request: Request) -> Database:
    return request.app.db


def setup_db(app):
    # MongoClient connects lazily, nothing is sent to the server until the first query
    app.db = MongoClient(app.config.MONGO_URI, uuidRepresentation="standard")[
        app.config.MONGO_DBNAME]


