"""Statutory rule table.

Versioned parameter sets for Saudi Labor Law (EOSB, annual leave,
overtime), GOSI contributions, and Nitaqat band thresholds. Loaded once
per process and read-only thereafter.
"""
