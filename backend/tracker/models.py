# backend/tracker/models.py
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models
from django.utils import timezone
import uuid


class TrackedModel(models.Model):
    """Common columns for every tracked record: UUID id plus timestamps."""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


#
# =
# Companies, contacts and applications
#
# =


class Company(TrackedModel):
    name = models.CharField(max_length=180)
    website = models.URLField(max_length=500, blank=True, null=True)
    careers_url = models.URLField(max_length=500, blank=True, null=True)
    notes = models.TextField(blank=True, null=True)

    class Meta:
        ordering = ['-created_at']
        verbose_name_plural = 'companies'

    def __str__(self):
        return self.name


class Contact(TrackedModel):
    STATUS_CHOICES = [
        ('REQUEST_SENT', 'Request Sent'),
        ('CONNECTED', 'Connected'),
        ('MESSAGED', 'Messaged'),
        ('REPLIED', 'Replied'),
        ('MEETING_SCHEDULED', 'Meeting Scheduled'),
        ('REFERRED', 'Referred'),
        ('NO_RESPONSE', 'No Response'),
    ]

    company = models.ForeignKey(Company, on_delete=models.CASCADE, related_name='contacts')
    name = models.CharField(max_length=180)
    linkedin_url = models.URLField(max_length=500, blank=True, null=True)
    email = models.EmailField(blank=True, null=True)
    phone = models.CharField(max_length=40, blank=True, null=True)
    position = models.CharField(max_length=220, blank=True, null=True)
    status = models.CharField(max_length=30, choices=STATUS_CHOICES, default='REQUEST_SENT')
    can_refer = models.BooleanField(default=False)
    willing_to_refer = models.BooleanField(default=False)
    notes = models.TextField(blank=True, null=True)
    conversation_notes = models.TextField(blank=True, null=True)
    messaged_date = models.DateTimeField(null=True, blank=True)
    last_interaction_date = models.DateTimeField(null=True, blank=True)

    class Meta:
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['company', '-created_at'], name='contact_company_created_idx'),
            models.Index(fields=['can_refer'], name='contact_can_refer_idx'),
        ]

    def __str__(self):
        return self.name


class Interaction(TrackedModel):
    """A logged touch point with a contact (call, message, meeting...)."""
    contact = models.ForeignKey(Contact, on_delete=models.CASCADE, related_name='interactions')
    type = models.CharField(max_length=60, blank=True, null=True)
    interaction_date = models.DateTimeField(default=timezone.now)
    notes = models.TextField(blank=True, null=True)

    class Meta:
        ordering = ['-interaction_date']


class Application(TrackedModel):
    STATUS_CHOICES = [
        ('NOT_APPLIED', 'Not Applied'),
        ('APPLIED', 'Applied'),
        ('IN_REVIEW', 'In Review'),
        ('INTERVIEW_SCHEDULED', 'Interview Scheduled'),
        ('OFFER_RECEIVED', 'Offer Received'),
        ('ACCEPTED', 'Accepted'),
        ('REJECTED', 'Rejected'),
        ('WITHDRAWN', 'Withdrawn'),
    ]

    company = models.ForeignKey(Company, on_delete=models.CASCADE, related_name='applications')
    position_title = models.CharField(max_length=220)
    description = models.TextField(blank=True, null=True)
    job_posting_url = models.URLField(max_length=500, blank=True, null=True)
    status = models.CharField(max_length=30, choices=STATUS_CHOICES, default='NOT_APPLIED')
    applied_date = models.DateTimeField(null=True, blank=True)
    application_deadline = models.DateTimeField(null=True, blank=True)
    salary_min = models.IntegerField(null=True, blank=True)
    salary_max = models.IntegerField(null=True, blank=True)
    salary_currency = models.CharField(max_length=3, default='USD')
    # Reference returned by the upload helper, never the file bytes
    resume_path = models.CharField(max_length=500)
    cover_letter_path = models.CharField(max_length=500, blank=True, null=True)
    is_referred = models.BooleanField(default=False)
    referred_by = models.ForeignKey(
        Contact, on_delete=models.SET_NULL, null=True, blank=True, related_name='referred_applications'
    )
    notes = models.TextField(blank=True, null=True)

    class Meta:
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['status'], name='app_status_idx'),
            models.Index(fields=['company', '-created_at'], name='app_company_created_idx'),
        ]

    def __str__(self):
        return f"{self.position_title} @ {self.company_id}"


class Interview(TrackedModel):
    STATUS_CHOICES = [
        ('SCHEDULED', 'Scheduled'),
        ('COMPLETED', 'Completed'),
        ('CANCELLED', 'Cancelled'),
        ('RESCHEDULED', 'Rescheduled'),
    ]

    application = models.ForeignKey(Application, on_delete=models.CASCADE, related_name='interviews')
    round = models.PositiveIntegerField()
    title = models.CharField(max_length=220)
    interview_date = models.DateTimeField()
    duration = models.PositiveIntegerField(null=True, blank=True, help_text="Minutes")
    interviewers = models.TextField(blank=True, null=True)
    location = models.CharField(max_length=255, blank=True, null=True)
    meeting_link = models.CharField(max_length=500, blank=True, null=True)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='SCHEDULED')
    feedback = models.TextField(blank=True, null=True)
    notes = models.TextField(blank=True, null=True)

    class Meta:
        ordering = ['interview_date']
        indexes = [models.Index(fields=['application', 'interview_date'], name='interview_app_date_idx')]


class Reminder(TrackedModel):
    TYPE_CHOICES = [
        ('FOLLOW_UP', 'Follow Up'),
        ('INTERVIEW_PREP', 'Interview Prep'),
        ('APPLICATION_DEADLINE', 'Application Deadline'),
        ('NETWORK', 'Network'),
        ('OTHER', 'Other'),
    ]

    application = models.ForeignKey(
        Application, on_delete=models.CASCADE, null=True, blank=True, related_name='reminders'
    )
    title = models.CharField(max_length=220)
    description = models.TextField(blank=True, null=True)
    due_date = models.DateTimeField()
    type = models.CharField(max_length=30, choices=TYPE_CHOICES, default='FOLLOW_UP')
    is_completed = models.BooleanField(default=False)
    completed_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        ordering = ['due_date']
        indexes = [models.Index(fields=['is_completed', 'due_date'], name='reminder_done_due_idx')]


#
# =
# Daily planning: tasks and calendar events
#
# =


class Task(TrackedModel):
    title = models.CharField(max_length=220)
    notes = models.TextField(blank=True, null=True)
    due_date = models.DateTimeField()
    is_completed = models.BooleanField(default=False)
    completed_at = models.DateTimeField(null=True, blank=True)
    parent_task = models.ForeignKey(
        'self', on_delete=models.CASCADE, null=True, blank=True, related_name='subtasks'
    )

    class Meta:
        ordering = ['due_date', 'created_at']
        indexes = [models.Index(fields=['parent_task', 'due_date'], name='task_parent_due_idx')]

    def __str__(self):
        return self.title


class Event(TrackedModel):
    TYPE_CHOICES = [
        ('INTERVIEW', 'Interview'),
        ('NETWORKING_CALL', 'Networking Call'),
        ('REMINDER', 'Reminder'),
        ('TODO', 'To-Do'),
    ]
    STATUS_CHOICES = [
        ('PENDING', 'Pending'),
        ('COMPLETED', 'Completed'),
        ('CANCELLED', 'Cancelled'),
        ('RESCHEDULED', 'Rescheduled'),
    ]

    type = models.CharField(max_length=30, choices=TYPE_CHOICES, default='REMINDER')
    application = models.ForeignKey(
        Application, on_delete=models.CASCADE, null=True, blank=True, related_name='events'
    )
    contact = models.ForeignKey(
        Contact, on_delete=models.CASCADE, null=True, blank=True, related_name='events'
    )
    title = models.CharField(max_length=220)
    description = models.TextField(blank=True, null=True)
    scheduled_date = models.DateTimeField()
    duration = models.PositiveIntegerField(null=True, blank=True, help_text="Minutes")
    round = models.PositiveIntegerField(null=True, blank=True)
    interviewers = models.TextField(blank=True, null=True)
    location = models.CharField(max_length=255, blank=True, null=True)
    meeting_link = models.CharField(max_length=500, blank=True, null=True)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='PENDING')
    is_completed = models.BooleanField(default=False)
    completed_at = models.DateTimeField(null=True, blank=True)
    feedback = models.TextField(blank=True, null=True)
    notes = models.TextField(blank=True, null=True)
    outcome = models.TextField(blank=True, null=True)
    # JSON-encoded list: [{"text": "...", "completed": false}, ...]
    next_steps = models.TextField(blank=True, null=True)
    next_steps_due_date = models.DateTimeField(null=True, blank=True)

    class Meta:
        ordering = ['scheduled_date']


#
# =
# Learning: resources and learning items
#
# =


class Resource(TrackedModel):
    title = models.CharField(max_length=255)
    description = models.TextField(blank=True, null=True)
    url = models.URLField(max_length=500, blank=True, null=True)
    type = models.CharField(max_length=40, blank=True, null=True)  # youtube|github|article|documentation|course|other
    category = models.CharField(max_length=120, blank=True, null=True)
    tags = models.TextField(blank=True, null=True)
    notes = models.TextField(blank=True, null=True)
    parent = models.ForeignKey(
        'self', on_delete=models.CASCADE, null=True, blank=True, related_name='sub_resources'
    )
    is_completed = models.BooleanField(default=False)
    is_favorite = models.BooleanField(default=False)

    class Meta:
        ordering = ['-created_at']

    def __str__(self):
        return self.title


class LearningItem(TrackedModel):
    TYPE_CHOICES = [
        ('SKILL', 'Skill'),
        ('PROJECT', 'Project'),
        ('CONCEPT', 'Concept'),
        ('COURSE', 'Course'),
    ]
    STATUS_CHOICES = [
        ('TO_LEARN', 'To Learn'),
        ('IN_PROGRESS', 'In Progress'),
        ('COMPLETED', 'Completed'),
        ('ON_HOLD', 'On Hold'),
    ]
    PRIORITY_CHOICES = [
        ('LOW', 'Low'),
        ('MEDIUM', 'Medium'),
        ('HIGH', 'High'),
    ]

    type = models.CharField(max_length=20, choices=TYPE_CHOICES, default='CONCEPT')
    title = models.CharField(max_length=255)
    description = models.TextField(blank=True, null=True)
    resource_url = models.URLField(max_length=500, blank=True, null=True)
    additional_links = models.TextField(blank=True, null=True)
    category = models.CharField(max_length=120, blank=True, null=True)
    tags = models.TextField(blank=True, null=True)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='TO_LEARN')
    priority = models.CharField(max_length=10, choices=PRIORITY_CHOICES, default='MEDIUM')
    progress = models.PositiveSmallIntegerField(
        default=0, validators=[MinValueValidator(0), MaxValueValidator(100)]
    )
    target_date = models.DateTimeField(null=True, blank=True)
    started_at = models.DateTimeField(null=True, blank=True)
    completed_at = models.DateTimeField(null=True, blank=True)
    notes = models.TextField(blank=True, null=True)
    key_takeaways = models.TextField(blank=True, null=True)

    class Meta:
        ordering = ['-created_at']

    def __str__(self):
        return self.title


class EmailTemplate(TrackedModel):
    CATEGORY_CHOICES = [
        ('CONNECTION_REQUEST', 'Connection Request'),
        ('FOLLOW_UP', 'Follow Up'),
        ('THANK_YOU', 'Thank You'),
        ('REFERRAL_REQUEST', 'Referral Request'),
        ('COLD_OUTREACH', 'Cold Outreach'),
        ('OTHER', 'Other'),
    ]

    name = models.CharField(max_length=180)
    subject = models.CharField(max_length=255)
    body = models.TextField()
    category = models.CharField(max_length=30, choices=CATEGORY_CHOICES)

    class Meta:
        ordering = ['name']

    def __str__(self):
        return self.name


#
# =
# Resume builder
#
# =


class Resume(TrackedModel):
    name = models.CharField(max_length=180)
    description = models.TextField(blank=True, null=True)
    target_role = models.CharField(max_length=180, blank=True, null=True)
    is_default = models.BooleanField(default=False)
    last_used_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        ordering = ['-updated_at']

    def __str__(self):
        return self.name


class ResumeEntry(TrackedModel):
    """Base for the ordered child collections of a resume.

    Date columns are free text ("Jan 2021", "Present") as typed on the resume.
    List-like columns hold JSON-encoded arrays of strings.
    """
    order = models.IntegerField(default=0)

    class Meta:
        abstract = True
        ordering = ['order', 'created_at']


class Experience(ResumeEntry):
    resume = models.ForeignKey(Resume, on_delete=models.CASCADE, related_name='experiences')
    company = models.CharField(max_length=180)
    position = models.CharField(max_length=180)
    location = models.CharField(max_length=160, blank=True, null=True)
    start_date = models.CharField(max_length=40)
    end_date = models.CharField(max_length=40, blank=True, null=True)
    bullet_points = models.TextField(default='[]', blank=True)

    class Meta(ResumeEntry.Meta):
        pass


class Project(ResumeEntry):
    resume = models.ForeignKey(Resume, on_delete=models.CASCADE, related_name='projects')
    name = models.CharField(max_length=180)
    description = models.TextField(blank=True, null=True)
    technologies = models.TextField(blank=True, null=True)
    github_url = models.URLField(max_length=500, blank=True, null=True)
    live_url = models.URLField(max_length=500, blank=True, null=True)
    start_date = models.CharField(max_length=40, blank=True, null=True)
    end_date = models.CharField(max_length=40, blank=True, null=True)
    bullet_points = models.TextField(default='[]', blank=True)

    class Meta(ResumeEntry.Meta):
        pass


class SkillCategory(ResumeEntry):
    resume = models.ForeignKey(Resume, on_delete=models.CASCADE, related_name='skills')
    name = models.CharField(max_length=120)
    skills = models.TextField(default='[]', blank=True)

    class Meta(ResumeEntry.Meta):
        verbose_name_plural = 'skill categories'


class Education(ResumeEntry):
    resume = models.ForeignKey(Resume, on_delete=models.CASCADE, related_name='education')
    school = models.CharField(max_length=180)
    degree = models.CharField(max_length=180)
    field = models.CharField(max_length=180, blank=True, null=True)
    location = models.CharField(max_length=160, blank=True, null=True)
    start_date = models.CharField(max_length=40)
    end_date = models.CharField(max_length=40, blank=True, null=True)
    gpa = models.CharField(max_length=20, blank=True, null=True)
    achievements = models.TextField(blank=True, null=True)

    class Meta(ResumeEntry.Meta):
        verbose_name_plural = 'education'


class ResumeTemplate(TrackedModel):
    name = models.CharField(max_length=180)
    description = models.TextField(blank=True, null=True)

    class Meta:
        ordering = ['-created_at']

    def __str__(self):
        return self.name


class ResumeSection(TrackedModel):
    template = models.ForeignKey(ResumeTemplate, on_delete=models.CASCADE, related_name='sections')
    name = models.CharField(max_length=120)
    order = models.IntegerField()
    latex_code = models.TextField(default='', blank=True)
    notes = models.TextField(blank=True, null=True)

    class Meta:
        ordering = ['order', 'created_at']
        constraints = [
            models.UniqueConstraint(fields=['template', 'name'], name='unique_section_name_per_template'),
        ]

    def __str__(self):
        return f"{self.template_id}: {self.name}"
