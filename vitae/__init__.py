"""
vitae - resume text to structured profile data

Turns the plain text of an uploaded resume into a structured record that a
profile-page renderer can consume.

Architecture:
- Segmenting Context: line normalization, section classification and
  per-section accumulation into a ResumeRecord

Text extraction from binary documents and HTML rendering live outside this
package and call into it with a text blob.
"""

__version__ = "0.1.0"
