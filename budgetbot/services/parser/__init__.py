# budgetbot/services/parser/__init__.py
