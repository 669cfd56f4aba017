# expense_backend/db.py
import os
import sqlite3

from flask import current_app, g

SCHEMA_FILE = os.path.join(os.path.dirname(__file__), "schema.sql")


def get_db():
    db = getattr(g, '_database', None)
    if db is None:
        db_path = current_app.config["DATABASE"]
        # ensure directory exists
        os.makedirs(os.path.dirname(os.path.abspath(db_path)), exist_ok=True)
        db = g._database = sqlite3.connect(db_path, check_same_thread=False)
        db.row_factory = sqlite3.Row
        db.execute("PRAGMA foreign_keys = ON")
    return db


def close_db(exception=None):
    db = g.pop('_database', None)
    if db is not None:
        db.close()


def query_db(query, args=(), one=False):
    cur = get_db().execute(query, args)
    rv = cur.fetchall()
    cur.close()
    return (rv[0] if rv else None) if one else rv


def execute_db(query, args=()):
    conn = get_db()
    cur = conn.cursor()
    cur.execute(query, args)
    conn.commit()
    last = cur.lastrowid
    cur.close()
    return last


def init_db(db_path):
    """
    Create the tables from schema.sql next to this module.
    Idempotent (IF NOT EXISTS in SQL) so safe to call at app startup.
    """
    if not os.path.exists(SCHEMA_FILE):
        raise FileNotFoundError(f"schema.sql not found at expected path: {SCHEMA_FILE}")

    os.makedirs(os.path.dirname(os.path.abspath(db_path)), exist_ok=True)

    conn = sqlite3.connect(db_path)
    try:
        with open(SCHEMA_FILE, 'r', encoding='utf-8') as f:
            sql = f.read()
        conn.executescript(sql)
        conn.commit()
    finally:
        conn.close()
