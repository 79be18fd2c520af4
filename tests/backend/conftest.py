import os

# backend.main builds its app at import time and needs a database URL.
os.environ.setdefault('DATABASE_URL', 'sqlite:///./test.db')
