"""Tests for BatchEncoder: header rendering, field omission and ordering."""

import logging

import pytest

from spkmeta.exceptions import (
    EmptyBatchError,
    ErrorCode,
    FolderCapacityError,
    MalformedFieldError,
    PayloadTooLargeError,
    UnsupportedVersionError,
)
from spkmeta.schemas import FileDescriptor, FileTag
from spkmeta.services.batch_encoder import BatchEncoder, encode_batch
from tests.conftest import make_file


@pytest.fixture()
def encoder():
    return BatchEncoder(max_payload_bytes=0)


class TestOmission:
    """Default values leave no trace in the string."""

    def test_plain_root_file(self, encoder):
        f = make_file(name="simple", ext="txt")
        assert encoder.encode([f]) == "1,simple,txt,,"

    def test_file_without_extension(self, encoder):
        assert encoder.encode([make_file(name="README", ext="")]) == "1,README,,,"


class TestFolders:

    def test_preset_folder_has_no_header_entry(self, encoder):
        f = make_file(name="report", ext="pdf", folder="Documents")
        assert encoder.encode([f]) == "1,report,pdf.2,,"

    def test_single_custom_folder_uses_empty_index(self, encoder):
        f = make_file(name="notes", ext="txt", folder="MyFiles")
        assert encoder.encode([f]) == "1|MyFiles,notes,txt,,"

    def test_nested_folder_is_single_entry(self, encoder):
        f = make_file(name="beach", ext="jpg", folder="Images/2023")
        assert encoder.encode([f]) == "1|Images/2023,beach,jpg,,"

    def test_custom_folders_follow_sorted_file_order(self, encoder):
        files = [
            make_file("Qm3", name="c", folder="Third"),
            make_file("Qm1", name="a", folder="First"),
            make_file("Qm2", name="b", folder="Second"),
        ]
        assert encoder.encode(files) == "1|First|Second|Third,a,txt,,,b,txt.1,,,c,txt.A,,"

    def test_reused_folder_reuses_index(self, encoder):
        files = [
            make_file("Qm1", name="a", folder="Work"),
            make_file("Qm2", name="b", folder="Play"),
            make_file("Qm3", name="c", folder="Work"),
        ]
        assert encoder.encode(files) == "1|Work|Play,a,txt,,,b,txt.1,,,c,txt,,"

    def test_root_next_to_custom_folder(self, encoder):
        files = [
            make_file("Qm1", name="top", ext="md"),
            make_file("Qm2", name="inner", ext="md", folder="MyFiles"),
        ]
        assert encoder.encode(files) == "1|MyFiles,top,md.0,,,inner,md,,"

    def test_preset_and_custom_mixed(self, encoder):
        files = [
            make_file("Qm1", name="song", ext="mp3", folder="Music"),
            make_file("Qm2", name="draft", ext="doc", folder="Drafts"),
        ]
        assert encoder.encode(files) == "1|Drafts,song,mp3.5,,,draft,doc,,"

    def test_too_many_folders(self, encoder):
        files = [make_file(f"Qm{i:03d}", folder=f"f{i}") for i in range(60)]
        with pytest.raises(FolderCapacityError):
            encoder.encode(files)


class TestHeader:

    def test_encryption_recipients(self, encoder):
        f = make_file(name="secret", ext="pdf", tags=FileTag.ENCRYPTED)
        result = encoder.encode([f], encryption_recipients=["alice", "bob"])
        assert result == "1#alice:bob,secret,pdf,,1"

    def test_recipients_before_folders(self, encoder):
        f = make_file(name="secret", ext="pdf", folder="Vault")
        result = encoder.encode([f], encryption_recipients=["alice"])
        assert result == "1#alice|Vault,secret,pdf,,"

    def test_recipient_order_preserved(self, encoder):
        result = encoder.encode([make_file()], encryption_recipients=["zed", "amy"])
        assert result.startswith("1#zed:amy,")

    def test_bad_recipient(self, encoder):
        with pytest.raises(MalformedFieldError):
            encoder.encode([make_file()], encryption_recipients=["a:b"])

    def test_unsupported_version(self, encoder):
        with pytest.raises(UnsupportedVersionError) as exc_info:
            encoder.encode([make_file()], version=2)
        assert exc_info.value.error_code == ErrorCode.UNSUPPORTED_VERSION


class TestFileFields:

    def test_packed_body(self, encoder):
        f = make_file(name="photo", ext="jpg", tags=12, license="1", labels="25")
        assert encoder.encode([f]) == "1,photo,jpg,,C-1-25"

    def test_flag_only(self, encoder):
        f = make_file(name="run", ext="sh", tags=FileTag.EXECUTABLE)
        assert encoder.encode([f]) == "1,run,sh,,8"

    def test_thumbnail(self, encoder):
        f = make_file(name="clip", ext="mp4", folder="Videos", thumb="QmThumb")
        assert encoder.encode([f]) == "1,clip,mp4.4,QmThumb,"

    def test_end_to_end_example(self, encoder):
        files = [
            make_file("QmPhoto", name="photo", ext="jpg", folder="Images",
                      thumb="QmThumb789", tags=4, license="1", labels="25"),
            make_file("QmAReport", name="report", ext="pdf", folder="Documents",
                      license="7", labels="1"),
        ]
        assert encoder.encode(files) == "1,report,pdf.2,,-7-1,photo,jpg.3,QmThumb789,4-1-25"

    def test_accepts_dicts(self, encoder):
        result = encoder.encode([{"content_id": "Qm1", "name": "a", "ext": "txt"}])
        assert result == "1,a,txt,,"

    def test_invalid_dict_rejected(self, encoder):
        with pytest.raises(MalformedFieldError):
            encoder.encode([{"content_id": "Qm1", "name": "a,b", "ext": "txt"}])

    def test_unvalidated_descriptor_rejected(self, encoder):
        bad = FileDescriptor.model_construct(
            content_id="Qm1", name="a", ext="txt", folder="", thumb="",
            tags=0, license="", labels="\u0663",
        )
        with pytest.raises(MalformedFieldError):
            encoder.encode([bad])


class TestDeterminism:

    def test_input_order_does_not_matter(self, encoder):
        files = [
            make_file("QmC", name="c", folder="Gamma", tags=4),
            make_file("QmA", name="a", folder="Alpha", license="2"),
            make_file("QmB", name="b", folder="Documents", labels="9"),
        ]
        first = encoder.encode(files)
        second = encoder.encode(list(reversed(files)))
        third = encoder.encode([files[1], files[0], files[2]])
        assert first == second == third

    def test_repeated_calls_identical(self, encoder):
        files = [make_file("Qm1", folder="X"), make_file("Qm2", folder="Y")]
        assert encoder.encode(files) == encoder.encode(files)


class TestLimits:

    def test_empty_batch(self, encoder):
        with pytest.raises(EmptyBatchError):
            encoder.encode([])

    def test_payload_limit(self):
        limited = BatchEncoder(max_payload_bytes=10)
        with pytest.raises(PayloadTooLargeError) as exc_info:
            limited.encode([make_file(name="a-rather-long-name")])
        assert exc_info.value.details["limit"] == 10

    def test_payload_within_limit(self):
        assert BatchEncoder(max_payload_bytes=100).encode([make_file(name="a")]) == "1,a,txt,,"

    def test_default_encoder_reads_settings(self):
        assert BatchEncoder().max_payload_bytes == 0
        assert encode_batch([make_file(name="a")]) == "1,a,txt,,"

    def test_logs_encoded_size(self, encoder, caplog):
        with caplog.at_level(logging.DEBUG, logger="spkmeta.services.batch_encoder"):
            encoder.encode([make_file(name="a")])
        record = next(r for r in caplog.records if r.getMessage() == "Encoded batch")
        assert record.file_count == 1
        assert record.size == len("1,a,txt,,")
