import os

from dotenv import load_dotenv

load_dotenv(os.path.join(os.path.dirname(__file__), '.env'))


def _split_origins(value):
    origins = [origin.strip() for origin in value.split(',') if origin.strip()]
    if not origins or origins == ['*']:
        return '*'
    return origins


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    HOST = os.environ.get('HOST', '0.0.0.0')
    PORT = int(os.environ.get('PORT', '4000'))
    # Comma separated list, or '*' to accept any origin
    CORS_ALLOWED_ORIGINS = _split_origins(os.environ.get('CORS_ALLOWED_ORIGINS', '*'))
    # Room codes look like the short base36 codes clients already share
    ROOM_CODE_LENGTH = int(os.environ.get('ROOM_CODE_LENGTH', '6'))
    ROOM_CODE_ALPHABET = os.environ.get('ROOM_CODE_ALPHABET', '0123456789abcdefghijklmnopqrstuvwxyz')
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()
