"""File checksums (MD5, SHA1, SHA256, CRC32), a batch hashing engine and the fhash command."""

__version__ = "1.0.0"
__all__ = ["crc32", "md5", "sha1", "sha256", "strhelper", "utils", "engine", "cli"]