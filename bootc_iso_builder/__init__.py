"""bootc ISO builder.

Builds a customized RHEL installer ISO from three inputs:
- a base boot ISO (supplied, or fetched from the compose server)
- a bootc container image exported to an OCI archive
- a kickstart (supplied, found on disk, or generated)

The two acquisitions run concurrently; mastering happens in a private
temporary workspace that is always removed.
"""

__all__ = []
