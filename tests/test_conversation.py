import json

from h_cli import Conversation, SYSTEM_PROMPT
from h_cli.core import ConversationFormatError, init_data_dir
from .test_base import BaseHTest


class TestConversationStore(BaseHTest):
    def setUp(self):
        super().setUp()
        init_data_dir(self.config)

    def test_empty_cache_means_no_conversation(self):
        self.assertIsNone(self.store.load())

    def test_whitespace_only_cache_means_no_conversation(self):
        self.config.latest_file.write_text("\n  \n")
        self.assertIsNone(self.store.load())

    def test_missing_cache_means_no_conversation(self):
        self.config.latest_file.unlink()
        self.assertIsNone(self.store.load())

    def test_invalid_json_names_the_file(self):
        self.config.latest_file.write_text("{not json")
        with self.assertRaises(ConversationFormatError) as ctx:
            self.store.load()
        self.assertIn(str(self.config.latest_file), str(ctx.exception))
        self.assertIsInstance(ctx.exception.__cause__, json.JSONDecodeError)

    def test_wrong_shape_is_rejected(self):
        for content in ("[1, 2, 3]", '"hello"', '{"messages": "nope"}', '{"messages": [1]}'):
            self.config.latest_file.write_text(content)
            with self.assertRaises(ConversationFormatError):
                self.store.load()

    def test_save_load(self):
        """A saved conversation loads back with the same turns"""
        conversation = Conversation(model="gpt-4")
        conversation.add_user_message("Hello")
        conversation.add_assistant_message("Hi there!")
        self.store.save(conversation)

        loaded = self.store.load()
        self.assertEqual(loaded.model, "gpt-4")
        self.assertEqual(loaded.messages, conversation.messages)
        self.assertFalse(self.config.latest_file.with_suffix(".tmp").exists())

        data = json.loads(self.config.latest_file.read_text())
        self.assertIn("updated_at", data)

    def test_system_prompt_inserted_once(self):
        conversation = Conversation(model="gpt-4")
        self.assertEqual(conversation.messages, [{"role": "system", "content": SYSTEM_PROMPT}])

        self.store.save(conversation)
        self.assertEqual(len(self.store.load().messages), 1)

    def test_missing_model_uses_default(self):
        self.config.latest_file.write_text('{"messages": [{"role": "user", "content": "hi"}]}')
        loaded = self.store.load()
        self.assertEqual(loaded.model, "gpt-3.5-turbo")
        self.assertEqual(loaded.messages[0]["role"], "system")
        self.assertEqual(loaded.messages[1], {"role": "user", "content": "hi"})
