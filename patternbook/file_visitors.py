"""File-system items processed by interchangeable visitors."""

from __future__ import annotations

from abc import ABC, abstractmethod


class FileSystemVisitor(ABC):
    """An operation over each kind of file."""

    @abstractmethod
    def visit_text(self, file: TextFile):
        """Handle a text file."""

    @abstractmethod
    def visit_image(self, file: ImageFile):
        """Handle an image file."""

    @abstractmethod
    def visit_video(self, file: VideoFile):
        """Handle a video file."""


class FileSystemItem(ABC):
    """A named file that dispatches to the matching visitor method."""

    def __init__(self, name: str) -> None:
        self.name = name

    @abstractmethod
    def accept(self, visitor: FileSystemVisitor):
        """Apply ``visitor`` to this item and return its result."""


class TextFile(FileSystemItem):
    def __init__(self, name: str, content: str = "") -> None:
        super().__init__(name)
        self.content = content

    def accept(self, visitor):
        return visitor.visit_text(self)


class ImageFile(FileSystemItem):
    def accept(self, visitor):
        return visitor.visit_image(self)


class VideoFile(FileSystemItem):
    def accept(self, visitor):
        return visitor.visit_video(self)


class _ReportingVisitor(FileSystemVisitor):
    """A visitor that describes what it does to each file."""

    action = ""

    def _report(self, kind: str, file: FileSystemItem) -> str:
        return f"{self.action} {kind} file: {file.name}"

    def visit_text(self, file):
        return self._report("TEXT", file)

    def visit_image(self, file):
        return self._report("IMAGE", file)

    def visit_video(self, file):
        return self._report("VIDEO", file)


class SizeCalculationVisitor(_ReportingVisitor):
    action = "Calculating size for"


class CompressionVisitor(_ReportingVisitor):
    action = "Compressing"


class VirusScanningVisitor(_ReportingVisitor):
    action = "Scanning"


def main(argv=None) -> int:
    """Run each visitor over a couple of sample files."""
    image = ImageFile("sample.jpg")
    for visitor in (SizeCalculationVisitor(), CompressionVisitor(), VirusScanningVisitor()):
        print(image.accept(visitor))
    video = VideoFile("test.mp4")
    print(video.accept(CompressionVisitor()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())