"""Identity bounded context: users, bearer tokens and authentication."""
