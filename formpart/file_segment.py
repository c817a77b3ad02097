#
# Copyright (c) 2025, NVIDIA CORPORATION. All rights reserved.
#

from pathlib import Path
from typing import BinaryIO, Optional, Union

from formpart.config import SegmentConfig
from formpart.errors import DirectoryCreateError, SinkOpenError
from formpart.multipart.segment_reader import SegmentReader
from formpart.part import Part
from formpart.rename import FileRenamer
from formpart.transform.transform_registry import TransformRegistry
from formpart.types import SegmentState, WriteResult
from formpart.utils import get_logger, human_size, to_path

logger = get_logger(__name__)


class FileSegment(Part):
    """
    A part of a multipart upload carrying a file (an `INPUT TYPE="file"` form field).

    All parts of an upload arrive on a single shared stream, so a segment's content
    can be read exactly once and must be read before the next part is processed.
    Don't keep a FileSegment around for later: by then its content has been passed by.

    Args:
        name (str): Name of the form field
        reader (SegmentReader): Reader over this segment's content, owned by the segment
        content_type (str): Content type declared for the file
        file_name (str, optional): File name declared by the sender, None if no file was supplied
        file_path (str, optional): Full path declared by the sender, informational only
        config (SegmentConfig, optional): Copy settings. Defaults to `SegmentConfig()`.
        transforms (TransformRegistry, optional): Registry selecting an output transform
            by content type. Defaults to the shared `TransformRegistry()`.
    """

    # pylint: disable=too-many-arguments,too-many-positional-arguments
    def __init__(
        self,
        name: str,
        reader: SegmentReader,
        content_type: str,
        file_name: Optional[str],
        file_path: Optional[str] = None,
        config: Optional[SegmentConfig] = None,
        transforms: Optional[TransformRegistry] = None,
    ):
        super().__init__(name)
        self._reader = reader
        self._content_type = content_type
        self._file_name = file_name
        self._file_path = file_path
        self._config = config or SegmentConfig()
        self._transforms = transforms or TransformRegistry()
        self._renamer: Optional[FileRenamer] = None
        self._directory: Optional[Path] = None
        self._state = SegmentState.UNCONSUMED

    @property
    def file_name(self) -> Optional[str]:
        """
        Name the file was stored with on the remote system, or None if no file was uploaded.

        If a renamer is installed, this changes during `write_to_path` to the name the
        file was actually written under.
        """
        return self._file_name

    @property
    def file_path(self) -> Optional[str]:
        """Full path of the file on the remote system, as declared by the sender."""
        return self._file_path

    @property
    def content_type(self) -> str:
        return self._content_type

    @property
    def directory(self) -> Optional[Path]:
        """Directory the file was written to, None before a successful `write_to_path`."""
        return self._directory

    @property
    def reader(self) -> SegmentReader:
        """
        Reader over the segment content. It must be read immediately and in full
        before the next part is processed; content is lost otherwise.
        """
        return self._reader

    @property
    def state(self) -> SegmentState:
        return self._state

    @property
    def consumed(self) -> bool:
        return self._state is SegmentState.CONSUMED

    @property
    def rename_policy(self) -> Optional[FileRenamer]:
        return self._renamer

    @rename_policy.setter
    def rename_policy(self, renamer: Optional[FileRenamer]) -> None:
        """Install the renamer used for handling file name collisions."""
        self._renamer = renamer

    def is_file(self) -> bool:
        return True

    def write_to_path(self, file_or_directory: Union[str, Path]) -> int:
        """
        Write the file to a file or a directory.

        See `materialize` for how the destination is resolved.

        Args:
            file_or_directory (Union[str, Path]): Existing directory, or destination file

        Returns:
            int: Number of bytes written, 0 if the segment carries no file
        """
        return self.materialize(file_or_directory).bytes_written

    def materialize(self, file_or_directory: Union[str, Path]) -> WriteResult:
        """
        Write the file to a file or a directory and describe the result.

        If an existing directory is given, the file is written into it under its declared
        name; otherwise it is written to the given path and the declared name is ignored.
        An installed renamer may then pick a different destination, whose name becomes
        the segment's `file_name`. Missing parent directories are created.

        If the segment carries no file, or was already consumed, nothing is written.

        Args:
            file_or_directory (Union[str, Path]): Existing directory, or destination file

        Returns:
            WriteResult: Stored file name, destination and number of bytes written

        Raises:
            DirectoryCreateError: If the destination directory cannot be created
            SinkOpenError: If the destination file cannot be opened
            OSError: If reading the segment or writing the file fails mid-copy
        """
        if self._file_name is None:
            return WriteResult()
        if self.consumed:
            return WriteResult(file_name=self._file_name)

        try:
            path = self._resolve_destination(to_path(file_or_directory))
            self._create_directory(path.parent)
            self._directory = path.parent
            try:
                sink = open(path, "wb")  # pylint: disable=consider-using-with
            except OSError as err:
                raise SinkOpenError(path, err) from err
            with sink:
                written = self._write(sink)
        finally:
            self._state = SegmentState.CONSUMED

        logger.debug(
            "Wrote %s (%d bytes) of field '%s' to '%s'",
            human_size(written),
            written,
            self.name,
            path,
        )
        return WriteResult(file_name=self._file_name, path=path, bytes_written=written)

    def write_to_sink(self, out: BinaryIO) -> int:
        """
        Write the file to the given writable. The writable is not closed.

        If the segment carries no file, or was already consumed, nothing is written.

        Args:
            out (BinaryIO): Destination owned by the caller

        Returns:
            int: Number of bytes written
        """
        if self._file_name is None or self.consumed:
            return 0
        try:
            return self._write(out)
        finally:
            self._state = SegmentState.CONSUMED

    def skip(self) -> int:
        """
        Discard the segment content so the next part of the upload can be read.

        Returns:
            int: Number of bytes discarded
        """
        if self.consumed:
            return 0
        skipped = 0
        try:
            chunk = self._reader.read(self._config.chunk_size)
            while chunk:
                skipped += len(chunk)
                chunk = self._reader.read(self._config.chunk_size)
        finally:
            self._state = SegmentState.CONSUMED
        return skipped

    def _resolve_destination(self, file_or_directory: Path) -> Path:
        if file_or_directory.is_dir():
            declared = Path(self._file_name)
            # An absolute declared name is still placed inside the target directory
            parts = declared.parts[1:] if declared.anchor else declared.parts
            path = file_or_directory.joinpath(*parts)
        else:
            path = file_or_directory
        if self._renamer is not None:
            path = to_path(self._renamer.rename(path))
            self._file_name = path.name
        return path

    @staticmethod
    def _create_directory(directory: Path) -> None:
        if directory.exists():
            return
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as err:
            raise DirectoryCreateError(directory, err) from err
        logger.debug("Created directory '%s'", directory)

    def _write(self, out: BinaryIO) -> int:
        """
        Copy the segment content into out, through the transform registered for the
        segment's content type. Doesn't check whether the segment carries a file.

        Returns:
            int: Number of bytes read from the segment, before any transform
        """
        sink = self._transforms.wrap(self._content_type, out)
        size = 0
        try:
            chunk = self._reader.read(self._config.chunk_size)
            while chunk:
                sink.write(chunk)
                size += len(chunk)
                chunk = self._reader.read(self._config.chunk_size)
        finally:
            if sink is not out:
                sink.close()
        return size
