"""
Ignite test configuration - pytest fixtures and factories

Provides factory_boy factories for accounts, projects (with applicants,
tasks and submissions), notifications and testimonials, plus API clients
authenticated with real bearer tokens.

RUNNING TESTS:
# Run all tests
pytest -v

# Run one app
pytest apps/projects -v
"""

import pytest

import factory
from factory.django import DjangoModelFactory
from rest_framework.test import APIClient


DEFAULT_PASSWORD = "testpass123"


# ============================================================================
# ACCOUNT FACTORIES
# ============================================================================

class UserFactory(DjangoModelFactory):
    """Factory for the role-tagged account model."""

    class Meta:
        model = 'users.User'
        django_get_or_create = ('email',)

    name = factory.Faker('name')
    email = factory.Sequence(lambda n: f"user{n}@example.com")
    role = 'Client'
    password = DEFAULT_PASSWORD
    is_active = True

    @classmethod
    def _create(cls, model_class, *args, **kwargs):
        """Hash the password instead of storing it raw."""
        password = kwargs.pop('password', None)
        user = super()._create(model_class, *args, **kwargs)
        if password:
            user.set_password(password)
            user.save()
        return user


class ClientFactory(UserFactory):
    role = 'Client'
    group_name = factory.Faker('company')


class FreelancerProfileFactory(DjangoModelFactory):
    class Meta:
        model = 'freelancer.FreelancerProfile'

    skills = factory.LazyFunction(lambda: ["Python", "Django"])
    github = "https://github.com/example"
    linkedin = "https://linkedin.com/in/example"


class FreelancerFactory(UserFactory):
    """Freelancer account with its role payload."""

    role = 'Freelancer'
    freelancer_profile = factory.RelatedFactory(FreelancerProfileFactory, factory_related_name='user')


class AdminFactory(UserFactory):
    role = 'Admin'
    is_staff = True


# ============================================================================
# PROJECT FACTORIES
# ============================================================================

class ProjectFactory(DjangoModelFactory):
    class Meta:
        model = 'projects.Project'

    client = factory.SubFactory(ClientFactory)
    title = factory.Sequence(lambda n: f"Project {n}")
    description = factory.Faker('paragraph')
    skills_required = factory.LazyFunction(lambda: ["Python"])
    type = "Web"


class ApplicantFactory(DjangoModelFactory):
    class Meta:
        model = 'projects.Applicant'

    project = factory.SubFactory(ProjectFactory)
    freelancer = factory.SubFactory(FreelancerFactory)
    cover_letter = factory.Faker('sentence')
    status = 'pending'


class TaskFactory(DjangoModelFactory):
    class Meta:
        model = 'projects.Task'

    applicant = factory.SubFactory(ApplicantFactory, status='accepted')
    description = factory.Faker('sentence')
    completed = False


class SubmissionFactory(DjangoModelFactory):
    class Meta:
        model = 'projects.Submission'

    project = factory.SubFactory(ProjectFactory)
    freelancer = factory.SubFactory(FreelancerFactory)
    message = "Done"
    github_url = "https://github.com/example/repo"
    status = 'pending'


# ============================================================================
# OTHER FACTORIES
# ============================================================================

class NotificationFactory(DjangoModelFactory):
    class Meta:
        model = 'notifications.Notification'

    recipient = factory.SubFactory(UserFactory)
    notif_type = 'NEW_APPLICANT'
    message = factory.Faker('sentence')


class TestimonialFactory(DjangoModelFactory):
    class Meta:
        model = 'testimonials.Testimonial'

    name = factory.Faker('name')
    role = "Client"
    quote = factory.Faker('sentence')
    rating = 5
    visible = True


# ============================================================================
# PYTEST FIXTURES
# ============================================================================

@pytest.fixture
def api_client():
    """Unauthenticated DRF API test client."""
    return APIClient()


@pytest.fixture
def auth_client(db):
    """
    Build an API client carrying a real bearer token for ``user``, so the
    JWT authentication path is exercised.
    """
    from apps.users.tokens import issue_tokens

    def _make(user):
        api = APIClient()
        api.credentials(HTTP_AUTHORIZATION=f"Bearer {issue_tokens(user)['token']}")
        return api

    return _make


@pytest.fixture
def client_user(db):
    return ClientFactory()


@pytest.fixture
def freelancer(db):
    return FreelancerFactory()


@pytest.fixture
def admin_account(db):
    return AdminFactory()


@pytest.fixture
def project(db, client_user):
    return ProjectFactory(client=client_user, title="Landing page")


@pytest.fixture
def accepted_applicant(db, project, freelancer):
    return ApplicantFactory(project=project, freelancer=freelancer, status='accepted')


@pytest.fixture
def user_factory(db):
    return UserFactory


@pytest.fixture
def client_factory(db):
    return ClientFactory


@pytest.fixture
def freelancer_factory(db):
    return FreelancerFactory


@pytest.fixture
def project_factory(db):
    return ProjectFactory


@pytest.fixture
def applicant_factory(db):
    return ApplicantFactory


@pytest.fixture
def task_factory(db):
    return TaskFactory


@pytest.fixture
def submission_factory(db):
    return SubmissionFactory


@pytest.fixture
def notification_factory(db):
    return NotificationFactory


@pytest.fixture
def testimonial_factory(db):
    return TestimonialFactory
