"""Account and payment services.

Pure(ish) logic used by the HTTP blueprints: the credential store, password
hashing, token signing and the payment gateway. Transport concerns stay in
`epex.api`.
"""
