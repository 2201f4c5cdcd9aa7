import os

class Config:
    ENV: str
    MONGO_HOST: str
    MONGO_PORT: int
    MONGO_DBNAME: str
    MONGO_URI: str
    FRONTEND_URL: str
    CLOUDINARY_CLOUD_NAME: str
    CLOUDINARY_API_KEY: str
    CLOUDINARY_API_SECRET: str
    MEDIA_FOLDER: str


class DevelopmentConfig(Config):
    ENV = 'development'
    MONGO_HOST = os.environ.get('DB_HOSTNAME') or "127.0.0.1"
    MONGO_PORT = int(os.environ.get('DB_PORT') or 27018)
    MONGO_DBNAME = "members"
    MONGO_URI = "mongodb://%s:%s/%s" % (MONGO_HOST, MONGO_PORT, MONGO_DBNAME)
    FRONTEND_URL = os.environ.get('FRONTEND_URL') or "http://localhost:3000"
    CLOUDINARY_CLOUD_NAME = os.environ.get('CLOUDINARY_CLOUD_NAME') or ''
    CLOUDINARY_API_KEY = os.environ.get('CLOUDINARY_API_KEY') or ''
    CLOUDINARY_API_SECRET = os.environ.get('CLOUDINARY_API_SECRET') or ''
    MEDIA_FOLDER = "members"


class ProductionConfig(Config):
    ENV = 'production'
    MONGO_HOST = os.environ.get('DB_HOSTNAME') or ''
    MONGO_PORT = int(os.environ.get('DB_PORT') or 27017)
    MONGO_DBNAME = os.environ.get('DB') or "members"
    DB_USER = os.environ.get('DB_USER')
    DB_PASSWORD = os.environ.get('DB_PASSWORD')
    try :
        del os.environ['DB_USER']
        del os.environ['DB_PASSWORD']
    except KeyError:
        # for CI test when env variables are not set
        pass
    MONGO_URI = "mongodb://%s:%s@%s:%s" % (DB_USER, DB_PASSWORD, MONGO_HOST, MONGO_PORT)
    FRONTEND_URL = os.environ.get('FRONTEND_URL') or "http://localhost:3000"
    CLOUDINARY_CLOUD_NAME = os.environ.get('CLOUDINARY_CLOUD_NAME') or ''
    CLOUDINARY_API_KEY = os.environ.get('CLOUDINARY_API_KEY') or ''
    CLOUDINARY_API_SECRET = os.environ.get('CLOUDINARY_API_SECRET') or ''
    MEDIA_FOLDER = os.environ.get('MEDIA_FOLDER') or "members"

class TestConfig(Config):
    ENV = 'test'
    MONGO_HOST = os.environ.get('TEST_DB_HOSTNAME') or '127.0.0.1'
    MONGO_PORT = int(os.environ.get('TEST_DB_PORT') or 27018)
    MONGO_DBNAME = "test"
    MONGO_URI = "mongodb://%s:%s/%s" % (MONGO_HOST, MONGO_PORT, MONGO_DBNAME)
    FRONTEND_URL = "http://localhost:3000"
    CLOUDINARY_CLOUD_NAME = "test"
    CLOUDINARY_API_KEY = "test"
    CLOUDINARY_API_SECRET = "test"
    MEDIA_FOLDER = "members"


config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'test' : TestConfig,
    'default': DevelopmentConfig
}
