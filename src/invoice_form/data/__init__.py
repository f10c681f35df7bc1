"""
Static data for the Invoice Form.

Modules:
- defaults: The hard-coded invoice used when neither a share link nor local
  storage provides one
"""
