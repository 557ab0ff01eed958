"""Initial schema: users, universities, transcripts, transactions, anomalies, audit logs.

Revision ID: educhain_001
Revises:
Create Date: 2026-10-18
"""

from alembic import op

# revision identifiers, used by Alembic.
revision = "educhain_001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    # ──────────────────────────────────────────────────────────────────────
    # Credentials
    # ──────────────────────────────────────────────────────────────────────
    op.execute("""
    CREATE TABLE IF NOT EXISTS universities (
        id              UUID PRIMARY KEY DEFAULT gen_random_uuid(),
        name            TEXT NOT NULL,
        verified        BOOLEAN NOT NULL DEFAULT FALSE,
        wallet_address  TEXT,
        contact_email   VARCHAR(255),
        website         TEXT,
        created_at      TIMESTAMP DEFAULT NOW()
    )
    """)

    op.execute("""
    CREATE TABLE IF NOT EXISTS users (
        id                  VARCHAR(255) PRIMARY KEY,
        email               VARCHAR(255) UNIQUE,
        first_name          VARCHAR(255),
        last_name           VARCHAR(255),
        profile_image_url   VARCHAR(1024),
        role                VARCHAR(50) NOT NULL DEFAULT 'student',
        university_id       UUID REFERENCES universities(id),
        created_at          TIMESTAMP DEFAULT NOW(),
        updated_at          TIMESTAMP DEFAULT NOW()
    )
    """)

    op.execute("""
    CREATE TABLE IF NOT EXISTS transcripts (
        id              UUID PRIMARY KEY DEFAULT gen_random_uuid(),
        student_id      VARCHAR(255) NOT NULL,
        university_id   UUID NOT NULL REFERENCES universities(id),
        student_name    TEXT NOT NULL,
        degree          TEXT NOT NULL,
        issue_date      TIMESTAMP NOT NULL,
        ipfs_hash       VARCHAR(128),
        block_txn       VARCHAR(128),
        qr_code         VARCHAR(64),
        verified        BOOLEAN NOT NULL DEFAULT FALSE,
        created_at      TIMESTAMP DEFAULT NOW()
    )
    """)
    op.execute("CREATE INDEX IF NOT EXISTS ix_transcripts_created_at ON transcripts (created_at)")
    op.execute("CREATE INDEX IF NOT EXISTS ix_transcripts_ipfs_hash ON transcripts (ipfs_hash)")
    op.execute("CREATE INDEX IF NOT EXISTS ix_transcripts_block_txn ON transcripts (block_txn)")
    op.execute("CREATE INDEX IF NOT EXISTS ix_transcripts_qr_code ON transcripts (qr_code)")

    # ──────────────────────────────────────────────────────────────────────
    # Financial monitoring
    # ──────────────────────────────────────────────────────────────────────
    op.execute("""
    CREATE TABLE IF NOT EXISTS transactions (
        id              UUID PRIMARY KEY DEFAULT gen_random_uuid(),
        type            VARCHAR(20) NOT NULL,
        amount          NUMERIC(10, 2) NOT NULL,
        currency        VARCHAR(3) NOT NULL DEFAULT 'USD',
        university_id   UUID REFERENCES universities(id),
        student_id      VARCHAR(255),
        description     TEXT,
        status          VARCHAR(20) NOT NULL DEFAULT 'completed',
        risk_score      NUMERIC(3, 2) NOT NULL DEFAULT 0.00,
        timestamp       TIMESTAMP DEFAULT NOW()
    )
    """)
    op.execute("CREATE INDEX IF NOT EXISTS ix_transactions_timestamp ON transactions (timestamp)")
    op.execute("CREATE INDEX IF NOT EXISTS ix_transactions_type ON transactions (type)")

    op.execute("""
    CREATE TABLE IF NOT EXISTS anomalies (
        id              UUID PRIMARY KEY DEFAULT gen_random_uuid(),
        transaction_id  UUID NOT NULL REFERENCES transactions(id),
        risk_score      NUMERIC(3, 2) NOT NULL,
        description     TEXT NOT NULL,
        severity        VARCHAR(10) NOT NULL,
        resolved        BOOLEAN NOT NULL DEFAULT FALSE,
        timestamp       TIMESTAMP DEFAULT NOW()
    )
    """)
    op.execute("CREATE INDEX IF NOT EXISTS ix_anomalies_timestamp ON anomalies (timestamp)")
    op.execute("CREATE INDEX IF NOT EXISTS ix_anomalies_resolved ON anomalies (resolved)")
    op.execute("CREATE INDEX IF NOT EXISTS ix_anomalies_transaction_id ON anomalies (transaction_id)")

    # ──────────────────────────────────────────────────────────────────────
    # Audit (append-only)
    # ──────────────────────────────────────────────────────────────────────
    op.execute("""
    CREATE TABLE IF NOT EXISTS audit_logs (
        id              UUID PRIMARY KEY DEFAULT gen_random_uuid(),
        event_type      VARCHAR(100) NOT NULL,
        user_id         VARCHAR(255),
        description     TEXT NOT NULL,
        metadata        JSONB,
        timestamp       TIMESTAMP NOT NULL DEFAULT NOW()
    )
    """)
    op.execute("CREATE INDEX IF NOT EXISTS ix_audit_logs_timestamp ON audit_logs (timestamp)")
    op.execute("CREATE INDEX IF NOT EXISTS ix_audit_logs_event_type ON audit_logs (event_type)")

    # Rows in audit_logs are never rewritten
    op.execute("""
    CREATE OR REPLACE FUNCTION audit_logs_block_mutation() RETURNS trigger AS $$
    BEGIN
        RAISE EXCEPTION 'audit_logs is append-only';
    END;
    $$ LANGUAGE plpgsql
    """)
    op.execute("""
    CREATE TRIGGER audit_logs_no_update_delete
        BEFORE UPDATE OR DELETE ON audit_logs
        FOR EACH ROW EXECUTE FUNCTION audit_logs_block_mutation()
    """)


def downgrade() -> None:
    op.execute("DROP TRIGGER IF EXISTS audit_logs_no_update_delete ON audit_logs")
    op.execute("DROP FUNCTION IF EXISTS audit_logs_block_mutation()")
    op.execute("DROP TABLE IF EXISTS audit_logs")
    op.execute("DROP TABLE IF EXISTS anomalies")
    op.execute("DROP TABLE IF EXISTS transactions")
    op.execute("DROP TABLE IF EXISTS transcripts")
    op.execute("DROP TABLE IF EXISTS users")
    op.execute("DROP TABLE IF EXISTS universities")
