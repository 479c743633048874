"""
scripts/generate_secret.py

Print a random 256-bit hex string for the SECRET_KEY setting.
"""
import secrets


def generate_secret(num_bytes: int = 32) -> str:
    return secrets.token_hex(num_bytes)


if __name__ == "__main__":
    print(f"SECRET_KEY={generate_secret()}")
