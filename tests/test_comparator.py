"""
Unit tests for ChunkedContentComparator.
Verifies byte-exact comparison, chunk alignment under short reads and early exit.
"""
import pytest
from unittest import mock
from dirdedupe.core.comparator import ChunkedContentComparator
from dirdedupe.core.hasher import HasherImpl
from dirdedupe.core.models import FileDescriptor, DEFAULT_CHUNK_SIZE
from dirdedupe.errors import FileOperationError
from conftest import write_file, describe, random_bytes


class CountingComparator(ChunkedContentComparator):
    """Counts chunk reads and records buffer sizes to observe early exit and allocation."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.reads = 0
        self.buffer_sizes = []

    def _read_into(self, file, stream, view):
        self.reads += 1
        self.buffer_sizes.append(len(view.obj))
        return super()._read_into(file, stream, view)


class TrickleStream:
    """Raw stream that never returns more than `step` bytes per read."""

    def __init__(self, data: bytes, step: int):
        self.data = data
        self.step = step
        self.position = 0

    def readinto(self, view) -> int:
        count = min(self.step, len(view), len(self.data) - self.position)
        view[:count] = self.data[self.position:self.position + count]
        self.position += count
        return count


# =============================================================================
# 1. EQUALITY
# =============================================================================
class TestEquality:

    def test_identical_files_are_equal(self, temp_dir):
        content = random_bytes(1, 512)
        first = describe(write_file(temp_dir / "a.bin", content))
        second = describe(write_file(temp_dir / "b.bin", content))

        assert ChunkedContentComparator().equal(first, second)

    def test_same_size_different_content(self, temp_dir):
        first = describe(write_file(temp_dir / "a.bin", random_bytes(1, 512)))
        second = describe(write_file(temp_dir / "b.bin", random_bytes(2, 512)))

        assert not ChunkedContentComparator().equal(first, second)

    def test_difference_in_last_byte_of_last_chunk(self, temp_dir):
        """A difference in a partial final chunk is detected."""
        content = random_bytes(3, 10)
        changed = content[:-1] + bytes([(content[-1] + 1) % 256])
        first = describe(write_file(temp_dir / "a.bin", content))
        second = describe(write_file(temp_dir / "b.bin", changed))

        assert not ChunkedContentComparator(chunk_size=4).equal(first, second)

    def test_multi_chunk_identical_files(self, temp_dir):
        content = random_bytes(4, 4096 + 17)
        first = describe(write_file(temp_dir / "a.bin", content))
        second = describe(write_file(temp_dir / "b.bin", content))

        assert ChunkedContentComparator(chunk_size=1000).equal(first, second)

    def test_zero_length_files_are_equal(self, temp_dir):
        first = describe(write_file(temp_dir / "a.bin", b""))
        second = describe(write_file(temp_dir / "b.bin", b""))

        assert ChunkedContentComparator().equal(first, second)

    def test_file_compared_with_itself(self, temp_dir):
        file = describe(write_file(temp_dir / "a.bin", b"self"))
        assert ChunkedContentComparator().equal(file, file)

    def test_default_chunk_size_is_one_mebibyte(self):
        assert ChunkedContentComparator().chunk_size == DEFAULT_CHUNK_SIZE == 1024 * 1024


# =============================================================================
# 2. STREAMING BEHAVIOUR
# =============================================================================
class TestStreaming:

    def test_early_exit_on_first_differing_chunk(self, temp_dir):
        """No further chunks are read after a mismatch."""
        first = describe(write_file(temp_dir / "a.bin", b"X" + b"\0" * 99))
        second = describe(write_file(temp_dir / "b.bin", b"Y" + b"\0" * 99))

        comparator = CountingComparator(chunk_size=10)
        assert not comparator.equal(first, second)
        assert comparator.reads == 2  # one chunk from each file

    def test_identical_files_are_read_exactly_once(self, temp_dir):
        content = b"Z" * 100
        first = describe(write_file(temp_dir / "a.bin", content))
        second = describe(write_file(temp_dir / "b.bin", content))

        comparator = CountingComparator(chunk_size=10)
        assert comparator.equal(first, second)
        assert comparator.reads == 20

    def test_read_into_fills_buffer_despite_short_reads(self):
        data = bytes(range(10))
        buffer = bytearray(10)
        file = FileDescriptor(path="trickle", size=10, modified_time=0.0, creation_time=0.0)

        count = ChunkedContentComparator._read_into(file, TrickleStream(data, step=3), memoryview(buffer))

        assert count == 10
        assert bytes(buffer) == data

    def test_read_into_stops_at_end_of_stream(self):
        buffer = bytearray(8)
        file = FileDescriptor(path="trickle", size=8, modified_time=0.0, creation_time=0.0)

        count = ChunkedContentComparator._read_into(file, TrickleStream(b"abc", step=2), memoryview(buffer))

        assert count == 3
        assert bytes(buffer[:3]) == b"abc"

    def test_file_shorter_than_catalogued_size_is_not_equal(self, temp_dir):
        """A file that shrank after the scan ends the comparison instead of looping."""
        write_file(temp_dir / "a.bin", b"same")
        write_file(temp_dir / "b.bin", b"same")
        first = FileDescriptor(str(temp_dir / "a.bin"), 100, 0.0, 0.0)
        second = FileDescriptor(str(temp_dir / "b.bin"), 100, 0.0, 0.0)

        assert not ChunkedContentComparator(chunk_size=16).equal(first, second)

    def test_small_files_do_not_allocate_full_chunk(self, temp_dir):
        """Buffers are sized to the file, not to the configured chunk."""
        a = write_file(temp_dir / "a.bin", b"abcd")
        b = write_file(temp_dir / "b.bin", b"abcd")
        comparator = CountingComparator()

        assert comparator.equal(describe(a), describe(b))
        assert comparator.buffer_sizes == [4, 4]

    def test_buffers_capped_at_chunk_size_for_large_files(self, temp_dir):
        data = random_bytes(7, 40)
        a = write_file(temp_dir / "a.bin", data)
        b = write_file(temp_dir / "b.bin", data)
        comparator = CountingComparator(chunk_size=16)

        assert comparator.equal(describe(a), describe(b))
        assert set(comparator.buffer_sizes) == {16}


# =============================================================================
# 3. PRE-FILTER
# =============================================================================
class TestPrefilter:

    def test_front_hash_mismatch_skips_full_comparison(self, temp_dir):
        first = describe(write_file(temp_dir / "a.bin", b"A" * 64))
        second = describe(write_file(temp_dir / "b.bin", b"B" * 64))
        comparator = ChunkedContentComparator(hasher=HasherImpl())

        with mock.patch.object(ChunkedContentComparator, "_open") as mock_open:
            assert not comparator.equal(first, second)
            mock_open.assert_not_called()

    def test_matching_front_still_requires_full_comparison(self, temp_dir):
        """Equal digests never decide equality on their own."""
        first = describe(write_file(temp_dir / "a.bin", b"H" * 32 + b"one"))
        second = describe(write_file(temp_dir / "b.bin", b"H" * 32 + b"two"))
        comparator = ChunkedContentComparator(chunk_size=8, hasher=HasherImpl(chunk_size=32))

        assert not comparator.equal(first, second)

    def test_identical_files_pass_prefilter(self, temp_dir):
        content = random_bytes(9, 2048)
        first = describe(write_file(temp_dir / "a.bin", content))
        second = describe(write_file(temp_dir / "b.bin", content))

        assert ChunkedContentComparator(hasher=HasherImpl()).equal(first, second)


# =============================================================================
# 4. ERRORS
# =============================================================================
class TestErrors:

    def test_size_mismatch_is_a_programming_error(self, temp_dir):
        first = describe(write_file(temp_dir / "a.bin", b"short"))
        second = describe(write_file(temp_dir / "b.bin", b"longer"))

        with pytest.raises(ValueError, match="different size"):
            ChunkedContentComparator().equal(first, second)

    def test_missing_file_raises_file_operation_error(self, temp_dir):
        first = describe(write_file(temp_dir / "a.bin", b"data"))
        second = FileDescriptor(str(temp_dir / "missing.bin"), 4, 0.0, 0.0)

        with pytest.raises(FileOperationError) as exc_info:
            ChunkedContentComparator().equal(first, second)
        assert exc_info.value.path == str(temp_dir / "missing.bin")
        assert exc_info.value.action == "read"

    def test_read_error_raises_file_operation_error(self):
        stream = mock.Mock()
        stream.readinto.side_effect = OSError("I/O error")
        file = FileDescriptor(path="broken.bin", size=4, modified_time=0.0, creation_time=0.0)

        with pytest.raises(FileOperationError, match="broken.bin"):
            ChunkedContentComparator._read_into(file, stream, memoryview(bytearray(4)))

    def test_invalid_chunk_size(self):
        with pytest.raises(ValueError):
            ChunkedContentComparator(chunk_size=0)
