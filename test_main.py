import io
import json
import unittest
from contextlib import redirect_stdout
from unittest.mock import patch, Mock

import requests

from cmc_api import main
from cmc_api.formatting import format_price, format_large, fmt_pct

def make_response(status: int, body) -> requests.Response:
    resp = requests.Response()
    resp.status_code = status
    resp.url = "https://pro-api.coinmarketcap.com/v1/test"
    resp.reason = "OK" if status == 200 else "Error"
    resp._content = json.dumps(body).encode("utf-8")
    return resp

class TestSmokeTest(unittest.TestCase):

    def setUp(self):
        self.session = Mock()
        patcher = patch("cmc_api.api.get_session", return_value=self.session)
        patcher.start()
        self.addCleanup(patcher.stop)

    def run_smoke(self):
        out = io.StringIO()
        with redirect_stdout(out):
            failures = main.run_smoke_test()
        return failures, out.getvalue()

    def test_all_failures_are_counted(self):
        self.session.get.side_effect = requests.ConnectionError("offline")
        failures, output = self.run_smoke()
        self.assertEqual(failures, len(main.SMOKE_TESTS))
        self.assertEqual(self.session.get.call_count, len(main.SMOKE_TESTS))
        self.assertIn("Status: FAILED", output)
        self.assertIn("Error: offline", output)

    def test_unexpected_payload_is_reported_not_raised(self):
        self.session.get.return_value = make_response(200, {"data": {}})
        with self.assertLogs("cmc_api.main", level="WARNING"):
            failures, output = self.run_smoke()
        self.assertEqual(failures, 0)
        self.assertIn("Unexpected payload", output)

    def test_listings_summary(self):
        result = {"success": True, "status": 200, "data": {"data": [{"name": "Bitcoin"}, {"name": "Ethereum"}]}}
        out = io.StringIO()
        with redirect_stdout(out):
            ok = main.report("listings", result, main._summarize_listings)
        self.assertTrue(ok)
        self.assertIn("Retrieved 2 cryptocurrencies", out.getvalue())
        self.assertIn("First cryptocurrency: Bitcoin", out.getvalue())

    def test_main_exit_code(self):
        self.session.get.side_effect = requests.ConnectionError("offline")
        with patch("cmc_api.main.setup_logging"), redirect_stdout(io.StringIO()):
            self.assertEqual(main.main(["cmc-smoke"]), 1)

    def test_main_list(self):
        out = io.StringIO()
        with patch("cmc_api.main.setup_logging"), redirect_stdout(out):
            self.assertEqual(main.main(["cmc-smoke", "--list"]), 0)
        self.assertIn("/tools/price-conversion", out.getvalue())
        self.session.get.assert_not_called()

class TestFormatting(unittest.TestCase):

    def test_format_price(self):
        self.assertEqual(format_price(None), "?")
        self.assertEqual(format_price(67123.4), "67,123")
        self.assertEqual(format_price(1.5), "1.50")
        self.assertEqual(format_price(0.05), "0.0500")
        self.assertEqual(format_price(0.001234), "0.001234")

    def test_format_large(self):
        self.assertEqual(format_large(2.5e12), "2.50T")
        self.assertEqual(format_large(3.21e9), "3.21B")
        self.assertEqual(format_large(4.5e6), "4.50M")
        self.assertEqual(format_large(1234), "1,234")

    def test_fmt_pct(self):
        self.assertEqual(fmt_pct(1.234), "▲+1.23%")
        self.assertEqual(fmt_pct(-2), "▼-2.00%")
        self.assertEqual(fmt_pct(None), "?%")

if __name__ == '__main__':
    unittest.main()
