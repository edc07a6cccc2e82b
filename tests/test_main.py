import io
import json
import os
import tempfile
from unittest import TestCase
from unittest.mock import patch

from sdpjson.__main__ import main

from .utils import load


class MainTest(TestCase):
    def test_stdin_stdout(self):
        stdout = io.StringIO()
        with patch('sys.stdin', io.StringIO(load('webrtc.sdp'))), \
                patch('sys.stdout', stdout):
            self.assertEqual(main([]), 0)
        self.assertEqual(json.loads(stdout.getvalue()), json.loads(load('webrtc.json')))

    def test_files(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            input_path = os.path.join(tmpdir, 'offer.sdp')
            output_path = os.path.join(tmpdir, 'offer.json')
            with open(input_path, 'w') as fp:
                fp.write(load('webrtc.sdp'))

            self.assertEqual(main([input_path, '-o', output_path, '--indent', '2']), 0)

            with open(output_path, 'r') as fp:
                data = json.load(fp)
        self.assertEqual(data['media'][1]['payloads'], '97')

    def test_parse_error(self):
        stdout = io.StringIO()
        with patch('sys.stdin', io.StringIO('v=0\ns=-\nt=0 0\n')), \
                patch('sys.stdout', stdout):
            with self.assertLogs('sdpjson', level='ERROR') as cm:
                self.assertEqual(main([]), 1)
        self.assertEqual(stdout.getvalue(), '')
        self.assertIn('missing origin (o=) line', cm.output[0])
