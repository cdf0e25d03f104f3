"""Lucky Vault: guess the secret country."""
