"""Evidence Uploader package.

Organized by feature modules (submissions, directory, backend, ...) with a thin
Flask controller layer over service/repository layers, the same way the
attendance features are laid out.
"""
