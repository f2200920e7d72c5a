from nacl.encoding import Base64Encoder
from nacl.public import PublicKey, SealedBox


def encrypt_secret(public_key: str, secret_value: str) -> str:
    """Encrypt a secret value for GitHub with a libsodium sealed box.

    Args:
        public_key: The base64 encoded public key returned by one of the `public-key` endpoints.
        secret_value: The plain text value of the secret.

    Returns:
        The base64 encoded ciphertext, ready to be sent as `encrypted_value`.
    """

    sealed_box = SealedBox(PublicKey(public_key.encode("utf-8"), encoder=Base64Encoder))

    encrypted: bytes = sealed_box.encrypt(secret_value.encode("utf-8"), encoder=Base64Encoder)

    return encrypted.decode("utf-8")
