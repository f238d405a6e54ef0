"""
URL configuration for the tracker API (mounted under /api/).
"""
from django.urls import path

from tracker import views

app_name = 'tracker'

urlpatterns = [
    path('companies', views.company_list_create, name='company-list'),
    path('companies/<str:company_id>', views.company_detail, name='company-detail'),
    path('contacts', views.contact_list_create, name='contact-list'),
    path('contacts/<str:contact_id>', views.contact_detail, name='contact-detail'),
    path('contacts/<str:contact_id>/interactions', views.contact_interactions, name='contact-interactions'),
    path('applications', views.application_list_create, name='application-list'),
    path('applications/<str:application_id>', views.application_detail, name='application-detail'),
    path('interviews', views.interview_list_create, name='interview-list'),
    path('interviews/<str:interview_id>', views.interview_detail, name='interview-detail'),
    path('reminders', views.reminder_list_create, name='reminder-list'),
    path('reminders/<str:reminder_id>', views.reminder_detail, name='reminder-detail'),
    path('tasks', views.task_list_create, name='task-list'),
    path('tasks/<str:task_id>', views.task_detail, name='task-detail'),
    path('events', views.event_list_create, name='event-list'),
    path('events/<str:event_id>', views.event_detail, name='event-detail'),
    path('resources', views.resource_list_create, name='resource-list'),
    path('resources/<str:resource_id>', views.resource_detail, name='resource-detail'),
    path('learning', views.learning_list_create, name='learning-list'),
    path('learning/<str:item_id>', views.learning_detail, name='learning-detail'),
    path('email-templates', views.email_template_list_create, name='email-template-list'),
    path('email-templates/<str:template_id>', views.email_template_detail, name='email-template-detail'),

    # Resume builder
    path('resumes-new', views.resume_list_create, name='resume-list'),
    path('resumes-new/<str:resume_id>', views.resume_detail, name='resume-detail'),
    path('experiences', views.experience_list_create, name='experience-list'),
    path('experiences/<str:entry_id>', views.experience_detail, name='experience-detail'),
    path('projects', views.project_list_create, name='project-list'),
    path('projects/<str:entry_id>', views.project_detail, name='project-detail'),
    path('skills', views.skill_list_create, name='skill-list'),
    path('skills/<str:entry_id>', views.skill_detail, name='skill-detail'),
    path('education', views.education_list_create, name='education-list'),
    path('education/<str:entry_id>', views.education_detail, name='education-detail'),
    path('resume-templates', views.resume_template_list_create, name='resume-template-list'),
    path('resume-templates/<str:template_id>', views.resume_template_detail, name='resume-template-detail'),
    path('resume-sections', views.resume_section_create, name='resume-section-list'),
    path('resume-sections/<str:section_id>', views.resume_section_detail, name='resume-section-detail'),

    path('analytics', views.analytics_overview, name='analytics'),
]
