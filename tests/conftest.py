import pytest
import os
import mongomock
from fastapi.testclient import TestClient
from utils.seeding import seed_members

root_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
test_seed_path = os.path.join(root_dir, "db/seeds/test_seeds")

# for pytest to create an FastAPI instance, used in client as argument


@pytest.fixture
def app():
    os.environ["API_ENV"] = 'test'
    from app import create_app
    return create_app()

# create a test client using an in-memory test database
# The db resets after every test


@pytest.fixture
def client(app):
    mongo_client = mongomock.MongoClient()
    # change the fastapi db to the test database
    app.db = mongo_client[app.config.MONGO_DBNAME]
    # safty check asserting we only clear our test database
    if app.db.name != 'test':
        pytest.exit("Error: test using wrong database")

    with TestClient(app) as client:
        seed_members(app.db, f"{test_seed_path}/test_members.json")
        yield client


def get_member_by_name(client: TestClient, name: str):
    return client.app.db.members.find_one({'name': name})
