"""
구매 예산 관리 테스트 모듈
"""

import unittest
from datetime import date
from pathlib import Path
import sys

from marshmallow import ValidationError

# 프로젝트 루트 디렉토리를 Python 경로에 추가
project_root = str(Path(__file__).parent.parent.parent)
if project_root not in sys.path:
    sys.path.append(project_root)

from loto.src.budget.budget_manager import BudgetManager
from loto.src.utils.config import BudgetConfig

# 2024-10-09는 수요일, 이번 주는 10-06(일) ~ 10-12(토)
TODAY = date(2024, 10, 9)


def fixed_clock():
    return TODAY


class TestBudgetManager(unittest.TestCase):
    def setUp(self):
        self.config = BudgetConfig(monthly_budget=10000, weekly_limit=3000, daily_limit=1000)
        self.manager = BudgetManager(self.config, clock=fixed_clock)

    def test_record_purchase(self):
        purchase = self.manager.record_purchase({
            'date': TODAY,
            'lottery_type': 'loto6',
            'amount': 400,
            'ticket_count': 2,
            'numbers': [[1, 2, 3, 4, 5, 6], [7, 8, 9, 10, 11, 12]],
        })

        self.assertTrue(purchase.id.startswith('purchase-'))
        self.assertEqual(purchase.date, TODAY)
        self.assertEqual(purchase.amount, 400)
        self.assertEqual(len(self.manager.purchases), 1)

    def test_purchase_ids_are_unique(self):
        ids = {
            self.manager.record_purchase({'date': '2024-10-09', 'lottery_type': 'loto6', 'amount': 200}).id
            for _ in range(10)
        }
        self.assertEqual(len(ids), 10)

    def test_invalid_purchase(self):
        with self.assertRaises(ValidationError):
            self.manager.record_purchase({'date': TODAY, 'lottery_type': 'loto6', 'amount': 0})
        with self.assertRaises(ValidationError):
            self.manager.record_purchase({'date': TODAY, 'lottery_type': 'loto6', 'amount': 200, 'ticket_count': 0})
        self.assertEqual(len(self.manager.purchases), 0)

    def test_period_totals(self):
        """일 / 주 / 월 구간 집계"""
        for day, amount in (
            ('2024-10-09', 200),   # 오늘
            ('2024-10-06', 400),   # 이번 주 일요일
            ('2024-10-05', 800),   # 지난 주 토요일, 이번 달
            ('2024-09-30', 1600),  # 지난 달
        ):
            self.manager.record_purchase({'date': day, 'lottery_type': 'loto6', 'amount': amount})

        self.assertEqual(self.manager.get_daily_spent(), 200)
        self.assertEqual(self.manager.get_weekly_spent(), 600)
        self.assertEqual(self.manager.get_monthly_spent(), 1400)

    def test_status(self):
        self.manager.record_purchase({'date': TODAY, 'lottery_type': 'loto6', 'amount': 900})

        daily = self.manager.get_daily_status()
        self.assertEqual(daily.budget, 1000)
        self.assertEqual(daily.remaining, 100)
        self.assertAlmostEqual(daily.usage_percentage, 90.0)
        self.assertTrue(daily.alert)
        self.assertFalse(daily.is_over_budget)

        monthly = self.manager.get_monthly_status()
        self.assertEqual(monthly.budget, 10000)
        self.assertFalse(monthly.alert)

    def test_derived_limits(self):
        """한도가 없으면 월 예산에서 계산"""
        manager = BudgetManager(BudgetConfig(monthly_budget=3000), clock=fixed_clock)
        self.assertEqual(manager.get_weekly_status().budget, 750)
        self.assertEqual(manager.get_daily_status().budget, 100)

    def test_can_purchase_within_budget(self):
        decision = self.manager.can_purchase(200)
        self.assertTrue(decision.allowed)
        self.assertIsNone(decision.reason)

    def test_daily_limit(self):
        self.manager.record_purchase({'date': TODAY, 'lottery_type': 'loto6', 'amount': 200})
        decision = self.manager.can_purchase(900)

        self.assertFalse(decision.allowed)
        self.assertEqual(decision.reason, '일 예산을 초과합니다')
        self.assertIn('800', decision.suggestion)

    def test_weekly_limit(self):
        self.manager.record_purchase({'date': '2024-10-06', 'lottery_type': 'loto6', 'amount': 2800})
        decision = self.manager.can_purchase(400)

        self.assertFalse(decision.allowed)
        self.assertEqual(decision.reason, '주 예산을 초과합니다')

    def test_monthly_limit(self):
        """월 한도가 가장 먼저 확인됨"""
        manager = BudgetManager(BudgetConfig(monthly_budget=1000, daily_limit=500), clock=fixed_clock)
        manager.record_purchase({'date': '2024-10-01', 'lottery_type': 'loto6', 'amount': 1000})
        decision = manager.can_purchase(600)

        self.assertFalse(decision.allowed)
        self.assertEqual(decision.reason, '월 예산을 초과합니다')

    def test_alert_warning(self):
        """경고 수준이면 허용하되 경고 문구"""
        manager = BudgetManager(BudgetConfig(monthly_budget=1000), clock=fixed_clock)
        manager.record_purchase({'date': '2024-10-01', 'lottery_type': 'loto6', 'amount': 700})
        decision = manager.can_purchase(200)

        self.assertTrue(decision.allowed)
        self.assertEqual(decision.reason, '예산 경고 수준에 도달했습니다')

    def test_allowed_purchase_stays_within_limits(self):
        """허용된 구매를 기록해도 한도를 넘지 않음"""
        for _ in range(30):
            if self.manager.can_purchase(200).allowed:
                self.manager.record_purchase({'date': TODAY, 'lottery_type': 'loto6', 'amount': 200})

        self.assertLessEqual(self.manager.get_daily_spent(), 1000)
        self.assertEqual(self.manager.get_daily_spent(), 1000)

    def test_purchase_history(self):
        for day in ('2024-10-01', '2024-10-08', '2024-10-03'):
            self.manager.record_purchase({'date': day, 'lottery_type': 'loto6', 'amount': 200})

        history = self.manager.get_purchase_history()
        self.assertEqual([p.date.day for p in history], [8, 3, 1])
        self.assertEqual(len(self.manager.get_purchase_history(limit=2)), 2)

    def test_statistics(self):
        empty = self.manager.get_statistics()
        self.assertEqual(empty.total_purchases, 0)
        self.assertEqual(empty.most_frequent_type, '없음')

        self.manager.record_purchase({'date': TODAY, 'lottery_type': 'loto6', 'amount': 600, 'ticket_count': 3})
        self.manager.record_purchase({'date': TODAY, 'lottery_type': 'numbers3', 'amount': 200})
        stats = self.manager.get_statistics()

        self.assertEqual(stats.total_purchases, 2)
        self.assertEqual(stats.total_spent, 800)
        self.assertEqual(stats.average_purchase, 400)
        self.assertEqual(stats.most_frequent_type, 'loto6')
        self.assertEqual(stats.purchases_by_type, {'loto6': 600, 'numbers3': 200})

    def test_real_expected_value(self):
        self.manager.record_purchase({'date': TODAY, 'lottery_type': 'loto6', 'amount': 2000, 'ticket_count': 10})
        result = self.manager.calculate_real_expected_value([1000])

        self.assertEqual(result.total_investment, 2000)
        self.assertEqual(result.total_winnings, 1000)
        self.assertEqual(result.net_result, -1000)
        self.assertAlmostEqual(result.roi, -50.0)
        self.assertAlmostEqual(result.expected_value_per_ticket, -100.0)
        self.assertEqual(result.break_even_tickets, 10)

    def test_real_expected_value_without_purchases(self):
        result = self.manager.calculate_real_expected_value([])
        self.assertEqual(result.roi, 0.0)
        self.assertEqual(result.expected_value_per_ticket, 0.0)
        self.assertEqual(result.break_even_tickets, 0)

    def test_config_from_dict(self):
        manager = BudgetManager({'monthly_budget': 5000, 'alert_threshold': 90}, clock=fixed_clock)
        self.assertEqual(manager.config.monthly_budget, 5000)
        self.assertEqual(manager.config.alert_threshold, 90)

        with self.assertRaises(ValidationError):
            BudgetManager({'monthly_budget': 0})

    def test_generate_report(self):
        self.manager.record_purchase({'date': TODAY, 'lottery_type': 'loto6', 'amount': 1000})
        report = self.manager.generate_report()

        self.assertIn('=== 구매 예산 관리 리포트 ===', report)
        self.assertIn('오늘: 1,000엔 / 1,000엔 (100.0%)', report)
        self.assertIn('loto6: 1,000엔', report)


if __name__ == '__main__':
    unittest.main()
