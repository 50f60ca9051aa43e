"""
Test the demonstration driver.
"""

from git_vfs import GitVfs
from git_vfs.__main__ import main, run_demo

SHA256_DEMO_INPUT = b"Hello, git virtual world!"


def test_run_demo_sequence():
    result = run_demo(GitVfs(), SHA256_DEMO_INPUT, "refs/heads/main", "new_hash", "sha256")

    assert result['blob_id'] == "25"
    assert result['content'] == SHA256_DEMO_INPUT
    assert result['head'] == "refs/heads/main"
    assert result['target'] == "25"
    assert result['updated_target'] == "new_hash"
    assert len(result['fingerprint']) == 64


def test_main_prints_results(capsys):
    assert main([]) == 0

    out = capsys.readouterr().out
    assert "blob_content: Hello, git virtual world!" in out
    assert "HEAD: refs/heads/main" in out
    assert "Main ref hash: 25" in out
    assert "Updated Main ref hash: new_hash" in out


def test_main_with_digest_ids(capsys):
    assert main(["--digest-ids", "--algorithm", "blake3", "--data", "abc"]) == 0

    out = capsys.readouterr().out
    assert out.startswith("blake3: ")
    assert "Main ref hash: ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad" in out


def test_main_reports_store_errors():
    """An empty ref name is rejected and surfaces as exit status 1."""
    assert main(["--ref", ""]) == 1
