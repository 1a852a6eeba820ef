from __future__ import annotations

import errno
import unittest
from pathlib import Path
from tempfile import TemporaryDirectory
from unittest.mock import patch

import requests
from pydantic import ValidationError

from aocfetch.errors import DestinationExistsError, ExitCode, FetchError, OutputWriteError
from aocfetch.io.fetcher import InputRequest, download_input, fetch_input, input_url, write_input
from aocfetch.util.paths import output_path_for
from tests.helpers import COOKIE, PUZZLE_INPUT, DummyResponse


class FetcherTests(unittest.TestCase):
    def test_input_url_layout(self) -> None:
        self.assertEqual(input_url(2022, 1), "https://adventofcode.com/2022/day/1/input")
        self.assertEqual(
            input_url(2015, 25, base_url="http://localhost:8000/"),
            "http://localhost:8000/2015/day/25/input",
        )

    def test_output_path_layout(self) -> None:
        self.assertEqual(output_path_for("input/", year=2022, day=1), Path("input/2022-1.txt"))
        self.assertEqual(
            output_path_for("input/", year=2022, day=1, cwd=Path("/work")),
            Path("/work/input/2022-1.txt"),
        )
        self.assertEqual(
            output_path_for("/abs/dir", year=2015, day=25, cwd=Path("/work")),
            Path("/abs/dir/2015-25.txt"),
        )

    def test_download_sends_session_cookie(self) -> None:
        response = DummyResponse(PUZZLE_INPUT)
        with patch("aocfetch.io.fetcher.requests.get", return_value=response) as mock_get:
            body = download_input("https://adventofcode.com/2022/day/1/input", COOKIE, user_agent="ua/1")

        self.assertEqual(body, PUZZLE_INPUT)
        mock_get.assert_called_once()
        args, kwargs = mock_get.call_args
        self.assertEqual(args[0], "https://adventofcode.com/2022/day/1/input")
        self.assertEqual(kwargs["headers"]["Cookie"], f"session={COOKIE}")
        self.assertEqual(kwargs["headers"]["User-Agent"], "ua/1")
        self.assertIsNone(kwargs["timeout"])

    def test_download_wraps_transport_errors(self) -> None:
        with patch("aocfetch.io.fetcher.requests.get", side_effect=requests.ConnectionError("refused")):
            with self.assertRaises(FetchError) as ctx:
                download_input("https://adventofcode.com/2022/day/1/input", COOKIE)

        self.assertEqual(ctx.exception.exit_code, ExitCode.FETCH_FAILED)
        self.assertIsInstance(ctx.exception.__cause__, requests.ConnectionError)

    def test_download_rejects_error_statuses(self) -> None:
        for status, hint in ((404, "unlocked"), (400, "cookie"), (503, "HTTP 503")):
            with patch("aocfetch.io.fetcher.requests.get", return_value=DummyResponse(b"", status)):
                with self.assertRaises(FetchError) as ctx:
                    download_input("https://adventofcode.com/2022/day/1/input", COOKIE)
            self.assertIn(hint, str(ctx.exception))

    def test_fetch_input_writes_body_verbatim(self) -> None:
        with TemporaryDirectory() as tmpdir:
            dest = output_path_for(Path(tmpdir) / "input", year=2022, day=1)
            request = InputRequest(day=1, year=2022, cookie=COOKIE, output=dest)

            with patch("aocfetch.io.fetcher.requests.get", return_value=DummyResponse(PUZZLE_INPUT)) as mock_get:
                path = fetch_input(request, timeout_seconds=5.0)

            self.assertEqual(path, dest)
            self.assertEqual(dest.read_bytes(), PUZZLE_INPUT)
            self.assertEqual(mock_get.call_args.kwargs["timeout"], 5.0)

    def test_fetch_input_never_touches_network_when_destination_exists(self) -> None:
        with TemporaryDirectory() as tmpdir:
            dest = Path(tmpdir) / "2022-1.txt"
            dest.write_bytes(b"previous")
            request = InputRequest(day=1, year=2022, cookie=COOKIE, output=dest)

            with patch("aocfetch.io.fetcher.requests.get") as mock_get:
                with self.assertRaises(DestinationExistsError) as ctx:
                    fetch_input(request)

            mock_get.assert_not_called()
            self.assertEqual(dest.read_bytes(), b"previous")
            self.assertEqual(ctx.exception.exit_code, ExitCode.DESTINATION_EXISTS)

    def test_fetch_input_network_failure_writes_nothing(self) -> None:
        with TemporaryDirectory() as tmpdir:
            dest = Path(tmpdir) / "input" / "2022-1.txt"
            request = InputRequest(day=1, year=2022, cookie=COOKIE, output=dest)

            with patch("aocfetch.io.fetcher.requests.get", side_effect=requests.Timeout("slow")):
                with self.assertRaises(FetchError):
                    fetch_input(request)

            self.assertFalse(dest.exists())

    def test_write_input_failure(self) -> None:
        with TemporaryDirectory() as tmpdir:
            blocker = Path(tmpdir) / "input"
            blocker.write_text("a file, not a directory", encoding="utf-8")
            with self.assertRaises(OutputWriteError) as ctx:
                write_input(blocker / "2022-1.txt", PUZZLE_INPUT)

        self.assertEqual(ctx.exception.exit_code, ExitCode.WRITE_FAILED)

    def test_write_input_refuses_to_overwrite(self) -> None:
        with TemporaryDirectory() as tmpdir:
            dest = Path(tmpdir) / "2022-1.txt"
            dest.write_bytes(b"keep")
            with self.assertRaises(DestinationExistsError):
                write_input(dest, PUZZLE_INPUT)
            self.assertEqual(dest.read_bytes(), b"keep")
            self.assertFalse((Path(tmpdir) / "2022-1.txt.download").exists())

    def test_interrupted_write_leaves_no_partial_file(self) -> None:
        def disk_full(path: Path, data: bytes) -> int:
            with open(path, "wb") as handle:
                handle.write(data[:3])
            raise OSError(errno.ENOSPC, "No space left on device")

        with TemporaryDirectory() as tmpdir:
            dest = Path(tmpdir) / "input" / "2022-1.txt"
            request = InputRequest(day=1, year=2022, cookie=COOKIE, output=dest)

            with patch("aocfetch.io.fetcher.requests.get", return_value=DummyResponse(PUZZLE_INPUT)):
                with patch.object(Path, "write_bytes", autospec=True, side_effect=disk_full):
                    with self.assertRaises(OutputWriteError):
                        fetch_input(request)

                self.assertFalse(dest.exists())
                self.assertEqual(list(dest.parent.iterdir()), [])

                fetch_input(request)

            self.assertEqual(dest.read_bytes(), PUZZLE_INPUT)

    def test_request_rejects_out_of_range_values(self) -> None:
        with self.assertRaises(ValidationError):
            InputRequest(day=26, year=2022, cookie=COOKIE, output=Path("x"))
        with self.assertRaises(ValidationError):
            InputRequest(day=1, year=2014, cookie=COOKIE, output=Path("x"))


if __name__ == "__main__":
    unittest.main()
