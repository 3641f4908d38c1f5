import random
from datetime import timedelta
from faker import Faker
from django.contrib.auth import get_user_model
from accounts.actors import actor_for_user
from patients import services as patient_services
from visits import services as visit_services
from prescriptions import services as prescription_services

fake = Faker()
User = get_user_model()

# -----------------------------
# Fake data generation settings
# -----------------------------
DOCTOR_COUNT = 3
PHARMACIST_COUNT = 2
PATIENT_COUNT = 10
VISITS_PER_PATIENT = 4
TOKENS_PER_PATIENT = 2
DEFAULT_PASSWORD = "password123"

MEDICINES = [
    ("Paracetamol", "500mg"),
    ("Amoxicillin", "250mg"),
    ("Metformin", "500mg"),
    ("Atorvastatin", "10mg"),
    ("Cetirizine", "10mg"),
]
COMPLAINTS = ["fever", "cough", "headache", "back pain", "fatigue", "rash"]


def create_user(username, role):
    # Create a user for the given role if it does not exist yet
    user, created = User.objects.get_or_create(
        username=username,
        defaults={
            'role': role,
            'full_name': fake.name(),
            'email': fake.email(),
            'phone': fake.phone_number(),
        }
    )
    if created:
        user.set_password(DEFAULT_PASSWORD)
        user.save()
    return user


def create_staff():
    doctors = [create_user(f"doc_{i}", "doctor") for i in range(DOCTOR_COUNT)]
    pharmacists = [create_user(f"pharm_{i}", "pharmacist") for i in range(PHARMACIST_COUNT)]
    print(f"✔ {len(doctors)} doctors and {len(pharmacists)} pharmacists created.")
    return doctors, pharmacists


def create_patients():
    # Register patient profiles through the same service the API uses
    patients = []
    for i in range(PATIENT_COUNT):
        user = create_user(f"patient_{i}", "patient")
        if hasattr(user, 'patient_profile'):
            patients.append(user.patient_profile)
            continue

        patient = patient_services.register_patient(
            actor_for_user(user),
            date_of_birth=fake.date_of_birth(minimum_age=1, maximum_age=90),
            sex=random.choice(["male", "female", "other"]),
            blood_group=random.choice(["A+", "B+", "O+", "AB-", ""]),
            emergency_contact=fake.phone_number(),
            address=fake.address().replace('\n', ', '),
            nearest_police_station=f"{fake.city()} Police Station",
        )
        patients.append(patient)

    print(f"✔ {len(patients)} patients created.")
    return patients


def create_tokens(patients):
    count = 0
    for patient in patients:
        actor = actor_for_user(patient.user)
        for _ in range(TOKENS_PER_PATIENT):
            patient_services.issue_token(actor, ttl=timedelta(hours=random.choice([1, 2, 6])))
            count += 1
    print(f"✔ {count} temporary tokens issued.")


def create_visits(patients, doctors, pharmacists):
    # Create visits with one prescription each, some of them verified
    visit_count = 0
    verified_count = 0
    for patient in patients:
        for _ in range(VISITS_PER_PATIENT):
            doctor = actor_for_user(random.choice(doctors))
            complaint = random.choice(COMPLAINTS)
            visit = visit_services.record_visit(
                doctor,
                patient,
                chief_complaint=complaint,
                diagnosis=fake.sentence(nb_words=4),
                notes=fake.paragraph(nb_sentences=2),
                is_critical=random.random() < 0.1,
            )
            visit_count += 1

            name, dosage = random.choice(MEDICINES)
            prescription = prescription_services.prescribe(
                doctor,
                visit.id,
                [{
                    "name": name,
                    "dosage": dosage,
                    "frequency": random.choice(["once daily", "twice daily", "every 8 hours"]),
                    "duration": f"{random.randint(3, 14)} days",
                }],
                instructions="Take after meals",
            )
            if random.random() < 0.5:
                prescription_services.verify(actor_for_user(random.choice(pharmacists)), patient, prescription.id)
                verified_count += 1

    print(f"✔ {visit_count} visits created, {verified_count} prescriptions verified.")


# -----------------------------
# Script execution
# -----------------------------
print("🚀 Starting Data Generation...")

try:
    doctors_list, pharmacists_list = create_staff()
    patients_list = create_patients()
    create_tokens(patients_list)
    create_visits(patients_list, doctors_list, pharmacists_list)

    print("\n✅ All fake data generated successfully!")
    print("ℹ️  Login Credentials:")
    print("   Doctor: doc_0")
    print("   Pharmacist: pharm_0")
    print("   Patient: patient_0")
    print(f"   Password: {DEFAULT_PASSWORD}")

except Exception as e:
    print(f"\n❌ Error: {e}")
    raise

# python3 manage.py shell < scripts/fake_data_generator.py
