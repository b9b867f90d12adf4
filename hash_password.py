# Produce the OPERATOR_PASSWORD_HASH value: python hash_password.py

import getpass
from passlib.context import CryptContext

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

if __name__ == "__main__":
    password = getpass.getpass("Operator password: ")
    if not password:
        raise SystemExit("Password cannot be empty.")
    print(pwd_context.hash(password))
