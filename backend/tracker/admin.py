from django.contrib import admin
from .models import (
    # Companies, contacts, applications
    Company, Contact, Interaction, Application, Interview, Reminder,
    # Planning
    Task, Event,
    # Learning
    Resource, LearningItem, EmailTemplate,
    # Resume builder
    Resume, Experience, Project, SkillCategory, Education, ResumeTemplate, ResumeSection,
)


@admin.register(Company)
class CompanyAdmin(admin.ModelAdmin):
    list_display = ['name', 'website', 'created_at']
    search_fields = ['name', 'notes']


@admin.register(Contact)
class ContactAdmin(admin.ModelAdmin):
    list_display = ['name', 'company', 'position', 'status', 'can_refer', 'last_interaction_date']
    list_filter = ['status', 'can_refer', 'willing_to_refer']
    search_fields = ['name', 'email', 'company__name']


@admin.register(Interaction)
class InteractionAdmin(admin.ModelAdmin):
    list_display = ['contact', 'type', 'interaction_date']
    list_filter = ['type']
    search_fields = ['contact__name', 'notes']


class InterviewInline(admin.TabularInline):
    model = Interview
    extra = 0


@admin.register(Application)
class ApplicationAdmin(admin.ModelAdmin):
    list_display = ['position_title', 'company', 'status', 'applied_date', 'is_referred']
    list_filter = ['status', 'is_referred']
    search_fields = ['position_title', 'company__name']
    inlines = [InterviewInline]


@admin.register(Interview)
class InterviewAdmin(admin.ModelAdmin):
    list_display = ['title', 'application', 'round', 'interview_date', 'status']
    list_filter = ['status']
    search_fields = ['title', 'application__position_title']


@admin.register(Reminder)
class ReminderAdmin(admin.ModelAdmin):
    list_display = ['title', 'type', 'due_date', 'is_completed']
    list_filter = ['type', 'is_completed']
    search_fields = ['title']


@admin.register(Task)
class TaskAdmin(admin.ModelAdmin):
    list_display = ['title', 'due_date', 'is_completed', 'parent_task']
    list_filter = ['is_completed']
    search_fields = ['title']


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ['title', 'type', 'scheduled_date', 'status', 'is_completed']
    list_filter = ['type', 'status', 'is_completed']
    search_fields = ['title']


@admin.register(Resource)
class ResourceAdmin(admin.ModelAdmin):
    list_display = ['title', 'type', 'category', 'is_completed', 'is_favorite']
    list_filter = ['type', 'is_completed', 'is_favorite']
    search_fields = ['title', 'tags']


@admin.register(LearningItem)
class LearningItemAdmin(admin.ModelAdmin):
    list_display = ['title', 'type', 'status', 'priority', 'progress']
    list_filter = ['type', 'status', 'priority']
    search_fields = ['title', 'tags']


@admin.register(EmailTemplate)
class EmailTemplateAdmin(admin.ModelAdmin):
    list_display = ['name', 'category', 'subject']
    list_filter = ['category']
    search_fields = ['name', 'subject']


# Resume builder
@admin.register(Resume)
class ResumeAdmin(admin.ModelAdmin):
    list_display = ['name', 'target_role', 'is_default', 'updated_at']
    search_fields = ['name', 'target_role']


@admin.register(Experience)
class ExperienceAdmin(admin.ModelAdmin):
    list_display = ['position', 'company', 'resume', 'order']
    search_fields = ['position', 'company']


@admin.register(Project)
class ProjectAdmin(admin.ModelAdmin):
    list_display = ['name', 'resume', 'order']
    search_fields = ['name', 'technologies']


@admin.register(SkillCategory)
class SkillCategoryAdmin(admin.ModelAdmin):
    list_display = ['name', 'resume', 'order']


@admin.register(Education)
class EducationAdmin(admin.ModelAdmin):
    list_display = ['school', 'degree', 'resume', 'order']
    search_fields = ['school', 'degree']


class ResumeSectionInline(admin.TabularInline):
    model = ResumeSection
    extra = 0


@admin.register(ResumeTemplate)
class ResumeTemplateAdmin(admin.ModelAdmin):
    list_display = ['name', 'created_at']
    search_fields = ['name']
    inlines = [ResumeSectionInline]


@admin.register(ResumeSection)
class ResumeSectionAdmin(admin.ModelAdmin):
    list_display = ['name', 'template', 'order']
    search_fields = ['name', 'template__name']
