"""
설정 관리 테스트 모듈
"""

import unittest
from pathlib import Path
import tempfile
import shutil
import sys
import os

# 프로젝트 루트 디렉토리를 Python 경로에 추가
project_root = str(Path(__file__).parent.parent.parent)
if project_root not in sys.path:
    sys.path.append(project_root)

from loto.src.utils.config import BudgetConfig, Config
from loto.src.utils.create_config import DEFAULT_CONFIG, write_default_config


class TestConfig(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.temp_dir = tempfile.mkdtemp()

    @classmethod
    def tearDownClass(cls):
        if os.path.exists(cls.temp_dir):
            shutil.rmtree(cls.temp_dir)

    def test_defaults(self):
        config = Config()
        self.assertEqual(config.analysis.max_number, 43)
        self.assertEqual(config.analysis.hot_window, 10)
        self.assertEqual(config.analysis.cold_threshold, 15)
        self.assertEqual(config.prediction.default_method, 'random')
        self.assertIsNone(config.budget)

    def test_partial_override(self):
        config = Config({'analysis': {'hot_count': 5}, 'prediction': {'seed': 3}})
        self.assertEqual(config.analysis.hot_count, 5)
        self.assertEqual(config.analysis.warm_count, 10)
        self.assertEqual(config.prediction.seed, 3)

    def test_save_and_load(self):
        """YAML 저장 후 다시 로드"""
        config = Config({
            'analysis': {'cold_threshold': 12},
            'budget': {'monthly_budget': 5000, 'daily_limit': 400},
        })
        filepath = os.path.join(self.temp_dir, 'nested', 'config.yaml')
        config.save(filepath)

        loaded = Config.from_file(filepath)
        self.assertEqual(loaded.analysis.cold_threshold, 12)
        self.assertEqual(loaded.budget.monthly_budget, 5000)
        self.assertEqual(loaded.budget.daily_limit, 400)
        self.assertEqual(loaded.to_dict(), config.to_dict())

    def test_load_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            Config().load(os.path.join(self.temp_dir, 'missing.yaml'))

    def test_update(self):
        config = Config()
        config.update({'analysis': {'max_number': 45}})
        self.assertEqual(config.analysis.max_number, 45)
        self.assertEqual(config.get('analysis'), {'max_number': 45})

        config.set('note', '테스트')
        self.assertEqual(config.get('note'), '테스트')
        self.assertIsNone(config.get('missing'))

    def test_write_default_config(self):
        filepath = write_default_config(Path(self.temp_dir) / 'default.yaml')
        loaded = Config.from_file(str(filepath))

        self.assertEqual(loaded.to_dict(), Config(DEFAULT_CONFIG).to_dict())
        self.assertEqual(loaded.budget.weekly_limit, 3000)


class TestBudgetConfig(unittest.TestCase):
    def test_monthly_budget_must_be_positive(self):
        with self.assertRaises(ValueError):
            BudgetConfig(monthly_budget=0)
        with self.assertRaises(ValueError):
            BudgetConfig(monthly_budget=-100)

    def test_alert_threshold_default(self):
        self.assertEqual(BudgetConfig(monthly_budget=1000).alert_threshold, 80)
        self.assertEqual(BudgetConfig(monthly_budget=1000, alert_threshold=0).alert_threshold, 80)
        self.assertEqual(BudgetConfig(monthly_budget=1000, alert_threshold=None).alert_threshold, 80)

    def test_frozen(self):
        config = BudgetConfig(monthly_budget=1000)
        with self.assertRaises(AttributeError):
            config.monthly_budget = 2000


if __name__ == '__main__':
    unittest.main()
