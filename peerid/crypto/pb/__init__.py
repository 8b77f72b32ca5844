"""Protocol buffer package for the key envelope shared by all key types."""
