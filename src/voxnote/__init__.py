"""voxnote -- transcribe chat audio attachments through a cloud or on-device provider."""

__version__ = '0.1.0'
