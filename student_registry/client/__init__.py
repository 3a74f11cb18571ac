"""client — thin consumer of the ModernStudentDirectory contract."""

from student_registry.client.client import DirectoryClient

__all__ = ["DirectoryClient"]
