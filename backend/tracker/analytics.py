# backend/tracker/analytics.py
"""
Application funnel and referral analytics for the dashboard.
"""
from collections import OrderedDict
import logging

from django.db.models import Count, Max, Q
from django.utils import timezone

from .models import Application, Contact

logger = logging.getLogger(__name__)

SUCCESS_STATUSES = ('OFFER_RECEIVED', 'ACCEPTED')
RESPONDED_STATUSES = ('INTERVIEW_SCHEDULED', 'OFFER_RECEIVED')


def _rate(part, whole):
    """Percentage with one decimal, as a string ("0.0" when ``whole`` is 0)."""
    value = (part / whole * 100) if whole else 0
    return f"{value:.1f}"


class ApplicationAnalyzer:
    """Summarises every application and contact in the tracker."""

    def __init__(self):
        self.applications = Application.objects.all()

    def get_overview(self):
        counts = self.applications.aggregate(
            total=Count('id'),
            applied=Count('id', filter=~Q(status='NOT_APPLIED')),
            interview=Count('id', filter=Q(status='INTERVIEW_SCHEDULED')),
            offer=Count('id', filter=Q(status='OFFER_RECEIVED')),
            rejected=Count('id', filter=Q(status='REJECTED')),
            accepted=Count('id', filter=Q(status='ACCEPTED')),
        )
        return {
            'totalApplications': counts['total'],
            'appliedCount': counts['applied'],
            'interviewCount': counts['interview'],
            'offerCount': counts['offer'],
            'rejectedCount': counts['rejected'],
            'acceptedCount': counts['accepted'],
        }

    def get_status_counts(self):
        rows = self.applications.values('status').annotate(count=Count('id')).order_by('status')
        return {row['status']: row['count'] for row in rows}

    def get_success_rates(self):
        """Share of referred vs. not referred applications that reached an offer."""
        counts = self.applications.aggregate(
            referred=Count('id', filter=Q(is_referred=True)),
            referred_success=Count('id', filter=Q(is_referred=True, status__in=SUCCESS_STATUSES)),
            other=Count('id', filter=Q(is_referred=False)),
            other_success=Count('id', filter=Q(is_referred=False, status__in=SUCCESS_STATUSES)),
        )
        return {
            'referral': _rate(counts['referred_success'], counts['referred']),
            'nonReferral': _rate(counts['other_success'], counts['other']),
        }

    def get_avg_response_time(self):
        """
        Mean whole days from appliedDate to the latest interview, over
        applications that got an interview or offer and have both dates.
        """
        rows = (
            self.applications
            .filter(applied_date__isnull=False, status__in=RESPONDED_STATUSES)
            .annotate(latest_interview=Max('interviews__interview_date'))
            .filter(latest_interview__isnull=False)
            .values_list('applied_date', 'latest_interview')
        )
        days = [(latest - applied).days for applied, latest in rows]
        average = sum(days) / len(days) if days else 0
        return f"{average:.1f}"

    def get_applications_per_month(self):
        months = OrderedDict()
        dates = self.applications.filter(applied_date__isnull=False).order_by('applied_date')
        for applied in dates.values_list('applied_date', flat=True):
            label = timezone.localtime(applied).strftime('%b %Y')
            months[label] = months.get(label, 0) + 1
        return months

    def get_top_companies(self, limit=10):
        rows = (
            self.applications
            .values('company__name')
            .annotate(count=Count('id'))
            .order_by('-count', 'company__name')[:limit]
        )
        return [{'name': row['company__name'], 'count': row['count']} for row in rows]

    def get_contact_summary(self):
        counts = Contact.objects.aggregate(
            total=Count('id'),
            referrable=Count('id', filter=Q(can_refer=True, willing_to_refer=True)),
        )
        return {
            'referrableContacts': counts['referrable'],
            'totalContacts': counts['total'],
        }


def build_analytics():
    analyzer = ApplicationAnalyzer()
    result = {
        'overview': analyzer.get_overview(),
        'statusCounts': analyzer.get_status_counts(),
        'successRates': analyzer.get_success_rates(),
        'avgResponseTime': analyzer.get_avg_response_time(),
        'applicationsPerMonth': analyzer.get_applications_per_month(),
        'topCompanies': analyzer.get_top_companies(),
    }
    result.update(analyzer.get_contact_summary())
    logger.debug("Analytics built for %s applications", result['overview']['totalApplications'])
    return result
