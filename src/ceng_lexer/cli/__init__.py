"""
CENG Lexer Command-Line Interface
=================================

- **cenglex**: scan a CENG source file and write its token dump

Implemented as a Click application.
"""

__all__ = ["cenglex"]
