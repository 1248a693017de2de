import os

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or 'sqlite:///epex.db'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    # Token signing; required, create_app refuses to start without it
    JWT_SECRET = os.environ.get('JWT_SECRET')
    JWT_EXPIRES_IN_SEC = int(os.environ.get('JWT_EXPIRES_IN_SEC', str(7 * 24 * 60 * 60)))
    # Payment gateway (Razorpay). Payments endpoints answer 500 until both are set.
    RAZORPAY_KEY_ID = os.environ.get('RAZORPAY_KEY_ID')
    RAZORPAY_KEY_SECRET = os.environ.get('RAZORPAY_KEY_SECRET')
    RAZORPAY_API_BASE = os.environ.get('RAZORPAY_API_BASE', 'https://api.razorpay.com/v1')
    RAZORPAY_TIMEOUT_SEC = int(os.environ.get('RAZORPAY_TIMEOUT_SEC', '15'))
    # Credential store backend: 'sql' or 'memory'
    USER_STORE = os.environ.get('USER_STORE', 'sql')
    BCRYPT_LOG_ROUNDS = int(os.environ.get('BCRYPT_LOG_ROUNDS', '12'))
    # Pre-hash with SHA-256 so passwords past bcrypt's 72-byte limit still work
    BCRYPT_HANDLE_LONG_PASSWORDS = True
    CORS_ORIGINS = [
        o.strip() for o in os.environ.get(
            'CORS_ORIGINS',
            'http://localhost:3000,http://127.0.0.1:3000',
        ).split(',') if o.strip()
    ]
