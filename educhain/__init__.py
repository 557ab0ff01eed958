"""
EduChain Ledger: credential issuance and financial anomaly monitoring API.

Architecture:
    educhain/
    ├── api/             # FastAPI routers (HTTP layer)
    ├── auth/            # Session token decoding, request dependencies
    ├── db/              # SQLAlchemy models, engine, repositories
    ├── middleware/      # Session auth, request context, error handling
    ├── schemas/         # Pydantic request/response models
    └── services/        # Risk scoring, audit trail, dashboard, verification, ledger

Module Boundaries:
    - Every state-changing endpoint appends one audit log entry
    - Risk scoring is a pure function of (amount, type)
    - The ledger endpoints are simulated; nothing is written to a real chain

Version: 1.0.0
"""

__version__ = "1.0.0"
