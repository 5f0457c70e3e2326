"""Represent block ciphers as functions over bit-vectors."""
