"""Database schema definitions"""

# Users table - username is the identity, password holds a bcrypt hash
USERS_TABLE = """
CREATE TABLE IF NOT EXISTS users (
    username TEXT PRIMARY KEY,
    password TEXT NOT NULL,
    first_name TEXT,
    last_name TEXT,
    phone TEXT,
    join_at DATETIME,
    last_login_at DATETIME
)
"""

# Messages table - append only, ids are never reused
MESSAGES_TABLE = """
CREATE TABLE IF NOT EXISTS messages (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    from_username TEXT NOT NULL REFERENCES users(username),
    to_username TEXT NOT NULL REFERENCES users(username),
    body TEXT,
    sent_at DATETIME NOT NULL,
    read_at DATETIME
)
"""

# Schema version table for migrations
SCHEMA_VERSION_TABLE = """
CREATE TABLE IF NOT EXISTS schema_version (
    version INTEGER PRIMARY KEY,
    applied_at DATETIME NOT NULL,
    description TEXT
)
"""

INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_messages_from ON messages(from_username)",
    "CREATE INDEX IF NOT EXISTS idx_messages_to ON messages(to_username)",
]

# All tables in order of creation
ALL_TABLES = [
    SCHEMA_VERSION_TABLE,
    USERS_TABLE,
    MESSAGES_TABLE,
]
