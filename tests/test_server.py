"""Tests for the sutja HTTP API."""

import asyncio
import json
import os
import tempfile
import unittest
import uuid

from fastapi.testclient import TestClient

from core.config import AUTO_ADVANCE_DELAY_SECONDS
from server.app import app, AsyncioScheduler, user_sessions
from server.config_file import ConfigFile


class ApiTestCase(unittest.TestCase):

    def setUp(self):
        self.client = TestClient(app)
        self.user_id = f"test-{uuid.uuid4().hex[:8]}"

    def tearDown(self):
        user_sessions.pop(self.user_id, None)

    def set_range(self, low, high, **extra):
        data = {'user_id': self.user_id, 'min_range': low, 'max_range': high}
        data.update(extra)
        response = self.client.post('/api/settings', json=data)
        self.assertEqual(response.status_code, 200)
        return response.json()

    def question(self):
        response = self.client.get('/api/question', params={'user_id': self.user_id})
        self.assertEqual(response.status_code, 200)
        return response.json()

    def answer(self, text, round_id=None):
        return self.client.post('/api/answer', json={
            'user_id': self.user_id, 'answer': text, 'round_id': round_id
        })


class TestRoot(ApiTestCase):

    def test_health(self):
        response = self.client.get('/')
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['service'], 'sutja')


class TestConvert(ApiTestCase):

    def test_sino(self):
        response = self.client.get('/api/convert', params={'number': 1234, 'system': 'sino'})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['text'], '천이백삼십사')

    def test_native(self):
        response = self.client.get('/api/convert', params={'number': 99, 'system': 'native'})
        self.assertEqual(response.json()['text'], '아흔아홉')

    def test_native_out_of_range_is_soft(self):
        response = self.client.get('/api/convert', params={'number': 100, 'system': 'native'})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['text'], '범위 초과')

    def test_negative_rejected(self):
        response = self.client.get('/api/convert', params={'number': -1, 'system': 'sino'})
        self.assertEqual(response.status_code, 400)

    def test_unknown_system_rejected(self):
        response = self.client.get('/api/convert', params={'number': 1, 'system': 'roman'})
        self.assertEqual(response.status_code, 422)


class TestQuizFlow(ApiTestCase):

    def test_initial_question_and_status(self):
        question = self.question()
        self.assertEqual(question['round_id'], 1)
        self.assertFalse(question['answered'])
        self.assertIsNone(question['expected'])

        status = self.client.get('/api/status', params={'user_id': self.user_id}).json()
        self.assertEqual(status['score']['display'], '0/0')
        self.assertEqual(status['settings']['number_system'], 'native')
        self.assertEqual(status['settings']['effective_max'], 10)

    def test_correct_answer(self):
        self.set_range(5, 5)
        question = self.question()
        self.assertEqual(question['prompt'], '다섯')

        response = self.answer('5', question['round_id'])
        self.assertEqual(response.status_code, 200)
        result = response.json()
        self.assertTrue(result['is_correct'])
        self.assertTrue(result['auto_advance'])
        self.assertEqual(result['advance_delay_ms'], int(AUTO_ADVANCE_DELAY_SECONDS * 1000))
        self.assertEqual(result['score']['display'], '1/1')

    def test_incorrect_answer_stays(self):
        self.set_range(5, 5, direction='english_to_korean')
        question = self.question()
        self.assertEqual(question['prompt'], '5')

        result = self.answer('넷', question['round_id']).json()
        self.assertFalse(result['is_correct'])
        self.assertFalse(result['auto_advance'])
        self.assertEqual(result['expected'], '다섯')

        question = self.question()
        self.assertTrue(question['answered'])
        self.assertEqual(question['expected'], '다섯')

    def test_double_submit_rejected(self):
        self.set_range(5, 5)
        round_id = self.question()['round_id']
        self.answer('4', round_id)
        response = self.answer('5', round_id)
        self.assertEqual(response.status_code, 400)

    def test_empty_answer_rejected(self):
        self.question()
        response = self.answer('   ')
        self.assertEqual(response.status_code, 400)

    def test_stale_round_rejected(self):
        round_id = self.question()['round_id']
        response = self.answer('5', round_id + 10)
        self.assertEqual(response.status_code, 409)

    def test_next_advances_once_per_round(self):
        self.set_range(5, 5)
        round_id = self.question()['round_id']
        self.answer('5', round_id)

        first = self.client.post('/api/next', json={'user_id': self.user_id, 'round_id': round_id}).json()
        second = self.client.post('/api/next', json={'user_id': self.user_id, 'round_id': round_id}).json()
        self.assertEqual(first['round_id'], round_id + 1)
        self.assertEqual(second['round_id'], round_id + 1)

    def test_next_without_round_id(self):
        round_id = self.question()['round_id']
        response = self.client.post('/api/next', json={'user_id': self.user_id})
        self.assertEqual(response.json()['round_id'], round_id + 1)

    def test_reset(self):
        self.set_range(5, 5)
        self.answer('5', self.question()['round_id'])
        response = self.client.post('/api/reset', json={'user_id': self.user_id})
        self.assertEqual(response.status_code, 200)
        status = self.client.get('/api/status', params={'user_id': self.user_id}).json()
        self.assertEqual(status['score']['total'], 0)


class TestSettings(ApiTestCase):

    def test_apply_sino(self):
        settings = self.set_range(1000, 2000, number_system='sino', direction='english_to_korean')
        self.assertEqual(settings['effective_min'], 1000)
        self.assertEqual(settings['effective_max'], 2000)
        prompt = int(self.question()['prompt'])
        self.assertTrue(1000 <= prompt <= 2000)

    def test_clamped_to_native_max(self):
        settings = self.set_range(0, 500)
        self.assertEqual(settings['effective_max'], 99)

    def test_inverted_range_swapped(self):
        settings = self.set_range(20, 10, number_system='sino')
        self.assertEqual((settings['effective_min'], settings['effective_max']), (10, 20))

    def test_non_numeric_range(self):
        settings = self.set_range('abc', '-5')
        self.assertEqual((settings['effective_min'], settings['effective_max']), (0, 0))

    def test_very_long_digit_string_clamps(self):
        settings = self.set_range(0, '9' * 5000, number_system='sino')
        self.assertEqual(settings['effective_max'], 9999)

    def test_infinite_max_clamps(self):
        body = '{"user_id": "' + self.user_id + '", "number_system": "sino", "min_range": 5, "max_range": 1e400}'
        response = self.client.post('/api/settings', content=body,
                                    headers={'Content-Type': 'application/json'})
        self.assertEqual(response.status_code, 200)
        settings = response.json()
        self.assertEqual((settings['effective_min'], settings['effective_max']), (5, 9999))

    def test_partial_update_keeps_values(self):
        self.set_range(3, 7)
        response = self.client.post('/api/settings', json={'user_id': self.user_id, 'number_system': 'sino'})
        settings = response.json()
        self.assertEqual(settings['number_system'], 'sino')
        self.assertEqual((settings['min_range'], settings['max_range']), (3, 7))

    def test_score_kept_across_settings(self):
        self.set_range(5, 5)
        self.answer('5', self.question()['round_id'])
        self.set_range(1, 9, number_system='sino')
        status = self.client.get('/api/status', params={'user_id': self.user_id}).json()
        self.assertEqual(status['score']['display'], '1/1')

    def test_invalid_system_rejected(self):
        response = self.client.post('/api/settings', json={'user_id': self.user_id, 'number_system': 'roman'})
        self.assertEqual(response.status_code, 422)

    def test_get_settings(self):
        self.set_range(2, 8)
        settings = self.client.get('/api/settings', params={'user_id': self.user_id}).json()
        self.assertEqual((settings['min_range'], settings['max_range']), (2, 8))


class TestAsyncioScheduler(unittest.TestCase):

    def test_fires_once(self):
        calls = []

        async def scenario():
            scheduler = AsyncioScheduler()
            scheduler.schedule(0.01, lambda: calls.append('first'))
            scheduler.schedule(0.01, lambda: calls.append('second'))
            await asyncio.sleep(0.05)

        asyncio.run(scenario())
        self.assertEqual(calls, ['second'])

    def test_cancel(self):
        calls = []

        async def scenario():
            scheduler = AsyncioScheduler()
            scheduler.schedule(0.01, lambda: calls.append('fired'))
            scheduler.cancel()
            await asyncio.sleep(0.05)

        asyncio.run(scenario())
        self.assertEqual(calls, [])


class TestConfigFile(unittest.TestCase):

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.tmpdir.name, 'config.json')

    def tearDown(self):
        self.tmpdir.cleanup()

    def write(self, content):
        with open(self.path, 'w', encoding='utf-8') as f:
            f.write(content)

    def test_missing_file(self):
        config = ConfigFile(self.path)
        self.assertEqual(config.load_config(), {})
        self.assertEqual(config.default_settings().number_system, 'native')
        self.assertEqual(config.advance_delay(), AUTO_ADVANCE_DELAY_SECONDS)

    def test_loads_defaults(self):
        self.write(json.dumps({
            'defaults': {'number_system': 'sino', 'direction': 'english_to_korean',
                         'min_range': 10, 'max_range': 20},
            'auto_advance_delay': 2
        }))
        config = ConfigFile(self.path)
        settings = config.default_settings()
        self.assertEqual(settings.number_system, 'sino')
        self.assertEqual(settings.get_effective_range(), (10, 20))
        self.assertEqual(config.advance_delay(), 2.0)

    def test_bad_json(self):
        self.write('{not json')
        self.assertEqual(ConfigFile(self.path).load_config(), {})

    def test_bad_values_fall_back(self):
        self.write(json.dumps({'defaults': {'number_system': 'roman'}, 'auto_advance_delay': 'soon'}))
        config = ConfigFile(self.path)
        self.assertEqual(config.default_settings().number_system, 'native')
        self.assertEqual(config.advance_delay(), AUTO_ADVANCE_DELAY_SECONDS)


if __name__ == '__main__':
    unittest.main()
