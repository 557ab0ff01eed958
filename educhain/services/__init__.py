"""
EduChain domain services.

Components:
- risk_scoring: fixed rule that scores a transaction and grades anomalies
- audit_trail: append-only audit entries for every state change
- transaction_service: records a transaction and raises its anomaly
- dashboard_service: on-demand aggregate statistics
- transcript_verification: public verify-by-hash lookups
- ledger_sim: simulated chain receipts, proofs and timings
"""
