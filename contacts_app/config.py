# contacts_app/config.py
import os
from dotenv import load_dotenv

load_dotenv()

class Config:
    SECRET_KEY = os.getenv('SECRET_KEY', 'change-me')
    MONGO_URI = os.getenv('MONGO_URI', 'mongodb://localhost:27017/contacts')

    # Listeners
    PORT = int(os.getenv('PORT', '5000'))
    WEB_PORT = int(os.getenv('WEB_PORT', '3000'))

    # Front-end -> API
    API_URL = os.getenv('API_URL', 'http://localhost:5000')
    API_TIMEOUT = float(os.getenv('API_TIMEOUT', '10'))

    # 'production' keeps logs terse, anything else is treated as development
    APP_ENV = os.getenv('APP_ENV', 'development').lower()
    CORS_ORIGINS = os.getenv('CORS_ORIGINS', '*')

    # Logging configuration
    LOG_FILE = os.getenv('LOG_FILE', 'logs/contacts.log')
    LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    LOG_MAX_BYTES = int(os.getenv('LOG_MAX_BYTES', '10000000'))  # 10MB
    LOG_BACKUP_COUNT = int(os.getenv('LOG_BACKUP_COUNT', '5'))


class TestingConfig(Config):
    TESTING = True
    APP_ENV = 'testing'
    API_URL = 'http://api.test'
    LOG_FILE = None
