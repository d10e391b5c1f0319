# doccheck packages
"""
Package structure:
- doccheck: documentation-comment conformance checker
  - src: reader, fixture registry, comparator, runner, CLI
  - conf: sample configuration and fixture files
  - tests: pytest suite
"""
