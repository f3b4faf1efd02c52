import shutil
import tempfile
import unittest
from pathlib import Path
from unittest.mock import Mock

from h_cli import Config, ConversationStore


class BaseHTest(unittest.TestCase):
    def setUp(self):
        # Use a throwaway home directory so ~/.h-data is never touched
        self.home = Path(tempfile.mkdtemp(prefix="h_cli_test_"))
        self.config = Config.from_env(environ={"EDITOR": "fake-editor"}, home=self.home)
        self.store = ConversationStore(self.config.latest_file)

        # Mock the OpenAI client: every call answers "Hi there!"
        self.mock_client = Mock()
        self.mock_client.chat.completions.create.return_value = Mock(
            choices=[Mock(message=Mock(content="Hi there!"))]
        )

    def tearDown(self):
        shutil.rmtree(self.home, ignore_errors=True)

    def prompt_files(self):
        return sorted(self.config.data_dir.glob("prompt_*.txt"))
