import os


def _database_uri(basedir):
    if os.environ.get('DATABASE_URL'):
        return os.environ.get('DATABASE_URL')
    if os.environ.get('MYSQL_HOST'):
        # MySQL configuration from environment variables
        mysql_user = os.environ.get('MYSQL_USER', 'suistone')
        mysql_password = os.environ.get('MYSQL_PASSWORD', '')
        mysql_host = os.environ.get('MYSQL_HOST')
        mysql_db = os.environ.get('MYSQL_DATABASE', 'suistone')
        return f'mysql+pymysql://{mysql_user}:{mysql_password}@{mysql_host}/{mysql_db}'
    # Development SQLite database
    return 'sqlite:///' + os.path.join(basedir, 'suistone.db')


def _weekdays(raw):
    return tuple(int(day) for day in raw.split(',') if day.strip())


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-secret-key-suistone')

    _basedir = os.path.abspath(os.path.dirname(__file__))

    SQLALCHEMY_DATABASE_URI = _database_uri(_basedir)
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Keep MySQL connections alive and test before use
    SQLALCHEMY_ENGINE_OPTIONS = {
        "pool_pre_ping": True,
        "pool_recycle": 3600,
    }

    # Optional JSON word list replacing the built-in Wordle pool
    WORD_BANK_PATH = os.environ.get('WORD_BANK_PATH')

    # Python weekday numbers (Monday is 0): Tuesday and Saturday
    HIGHERLOWER_DAYS = _weekdays(os.environ.get('HIGHERLOWER_DAYS', '1,5'))


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_ENGINE_OPTIONS = {}
    WORD_BANK_PATH = None
    HIGHERLOWER_DAYS = (1, 5)
