import os
import unittest
from unittest.mock import patch

from fastapi.testclient import TestClient

from nutriplan.api.api_ai import AIResponseError, MacroResult
from nutriplan.api.api_run import app
from nutriplan.domain.Macros import Macros
from nutriplan.tests.factories import make_plan

PROFILE = {
    "age": 30, "weight": 70, "height": 170, "gender": "female",
    "goal": "lose_weight", "activityLevel": "moderate", "dietaryRestrictions": "",
}
MACROS = MacroResult(Macros(protein=120, carbs=150, fats=50, calories=1530), "Beba bastante água.")


class TestSessionFlow(unittest.TestCase):

    def setUp(self):
        self.client = TestClient(app)
        # establish the session cookie
        self.assertEqual(self.client.get('/api/session').status_code, 200)

    def _submit_profile(self):
        with patch('nutriplan.api.api_ai.calculate_user_macros', return_value=MACROS):
            resp = self.client.post('/api/profile', json=PROFILE)
        self.assertEqual(resp.status_code, 200, resp.text)
        return resp.json()

    def _generate_plan(self):
        with patch('nutriplan.api.api_ai.generate_weekly_plan', return_value=make_plan()):
            resp = self.client.post('/api/plan/generate')
        self.assertEqual(resp.status_code, 200, resp.text)
        return resp.json()

    def test_initial_state(self):
        data = self.client.get('/api/session').json()
        self.assertEqual(data['view'], 'SETUP')
        self.assertEqual(data['theme'], 'light')
        self.assertFalse(data['has_profile'])
        self.assertFalse(data['has_plan'])

    def test_missing_key_is_reported_as_warning(self):
        with patch.dict(os.environ, {'OPENAI_API_KEY': ''}):
            data = self.client.get('/api/session').json()
        self.assertFalse(data['api_key_configured'])
        self.assertIn('OPENAI_API_KEY', data['warning'])

    def test_default_profile(self):
        data = self.client.get('/api/profile').json()
        self.assertTrue(data['is_default'])
        self.assertEqual(data['profile']['age'], 30)
        self.assertEqual(data['profile']['activityLevel'], 'moderate')

    def test_views_need_a_profile(self):
        resp = self.client.post('/api/view', json={'view': 'DASHBOARD'})
        self.assertEqual(resp.status_code, 409)
        self.assertEqual(self.client.get('/api/dashboard').status_code, 409)
        self.assertEqual(self.client.post('/api/view', json={'view': 'SETUP'}).status_code, 200)

    def test_invalid_profile_is_rejected(self):
        resp = self.client.post('/api/profile', json=dict(PROFILE, gender='x'))
        self.assertEqual(resp.status_code, 422)

    def test_profile_then_dashboard(self):
        data = self._submit_profile()
        self.assertEqual(data['view'], 'DASHBOARD')
        self.assertEqual(data['profile']['calculatedMacros']['calories'], 1530)

        dash = self.client.get('/api/dashboard').json()
        self.assertEqual(dash['calories'], 1530)
        self.assertEqual(dash['goal_label'], 'lose weight')
        self.assertEqual(dash['advice'], 'Beba bastante água.')
        self.assertFalse(dash['has_plan'])

    def test_macro_failure_is_a_generic_error(self):
        with patch('nutriplan.api.api_ai.calculate_user_macros', side_effect=AIResponseError('bad')):
            resp = self.client.post('/api/profile', json=PROFILE)
        self.assertEqual(resp.status_code, 502)
        self.assertFalse(self.client.get('/api/session').json()['has_profile'])

    def test_generate_requires_profile(self):
        self.assertEqual(self.client.post('/api/plan/generate').status_code, 409)

    def test_generation_failure_resets_flag(self):
        self._submit_profile()
        with patch('nutriplan.api.api_ai.generate_weekly_plan', side_effect=AIResponseError('schema')):
            resp = self.client.post('/api/plan/generate')
        self.assertEqual(resp.status_code, 502)
        state = self.client.get('/api/session').json()
        self.assertFalse(state['is_generating'])
        self.assertFalse(state['has_plan'])
        # the user can retry by hand
        self._generate_plan()

    def test_plan_views(self):
        self._submit_profile()
        data = self._generate_plan()
        self.assertEqual(data['view'], 'MEAL_PLAN')

        plan = self.client.get('/api/plan').json()
        self.assertEqual(plan['day_tabs'], ['Monday', 'Tuesday'])
        self.assertEqual(plan['selected_day'], 0)

        resp = self.client.post('/api/plan/select-day', json={'index': 1})
        self.assertEqual(resp.json()['day']['day'], 'Tuesday')
        self.assertEqual(self.client.post('/api/plan/select-day', json={'index': 7}).status_code, 404)
        self.assertEqual(self.client.get('/api/plan/days/0').json()['day'], 'Monday')

        pdf = self.client.get('/export_pdf')
        self.assertEqual(pdf.status_code, 200)
        self.assertEqual(pdf.headers['content-type'], 'application/pdf')
        self.assertTrue(pdf.content.startswith(b'%PDF'))

    def test_shopping_list_without_plan(self):
        self.assertEqual(self.client.get('/api/shopping-list').status_code, 404)

    def test_shopping_list_toggle_and_progress(self):
        self._submit_profile()
        self._generate_plan()

        data = self.client.get('/api/shopping-list').json()
        self.assertEqual(data['total_items'], 5)
        self.assertEqual(data['progress'], 0)

        resp = self.client.post('/api/shopping-list/toggle', json={'category': 'Grains', 'item': 'Rice'})
        self.assertEqual(resp.status_code, 200)
        body = resp.json()
        self.assertEqual(body['id'], 'grains-rice')
        self.assertTrue(body['checked'])
        self.assertEqual(body['progress'], 20)

        missing = self.client.post('/api/shopping-list/toggle', json={'category': 'grains', 'item': 'quinoa'})
        self.assertEqual(missing.status_code, 404)

        self.client.post('/api/shopping-list/reset')
        self.assertEqual(self.client.get('/api/shopping-list').json()['checked_count'], 0)

        pdf = self.client.get('/export_shopping_pdf')
        self.assertEqual(pdf.status_code, 200)
        self.assertTrue(pdf.content.startswith(b'%PDF'))

    def test_new_plan_clears_checklist(self):
        self._submit_profile()
        self._generate_plan()
        self.client.post('/api/shopping-list/toggle', json={'category': 'grains', 'item': 'rice'})
        self._generate_plan()
        self.assertEqual(self.client.get('/api/shopping-list').json()['checked_count'], 0)

    def test_theme_toggle(self):
        self.assertEqual(self.client.post('/api/theme/toggle').json()['theme'], 'dark')
        self.assertEqual(self.client.get('/api/session').json()['theme'], 'dark')
