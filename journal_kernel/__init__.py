"""
Journal Kernel - General-ledger journal entry command validation

Validates a request to record a journal entry before it is handed to the
posting layer:
- Manual debit/credit line requests
- Accounting-rule shortcut requests (rule id plus a single amount)
- Non-fail-fast error accumulation, one aggregated failure per command
"""

__version__ = "0.1.0"
