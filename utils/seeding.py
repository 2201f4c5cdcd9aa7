from pymongo import MongoClient
from app import config
from app.models import MemberInput
import json
import os


base_dir = "db/seeds"


def seed_members(db, seed_path):
    ''' seed based on seed file, members already present by name are skipped '''
    new_members = []
    with open(seed_path, "r") as f:
        members = json.load(f)
    for member in members:
        db_member = db.members.find_one({'name': member['name']})
        if db_member:
            continue
        new_members.append(MemberInput.model_validate(member).model_dump(exclude_none=True))
    if len(new_members):
        db["members"].insert_many(new_members)
    return len(new_members)


def get_db():
    env = os.getenv('API_ENV', 'default')
    conf = config[env]
    return MongoClient(conf.MONGO_URI, uuidRepresentation="standard")[conf.MONGO_DBNAME]


if __name__ == "__main__":
    db = get_db()
    seed_members(db, f"{base_dir}/members.json")
