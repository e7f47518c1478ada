"""Provider and specialty fixtures."""
from schemas import Certification, Education, OfficeAddress, ProviderCreate

SPECIALTIES = [
    "Primary Care",
    "Cardiology",
    "Dermatology",
    "Orthopedics",
    "Neurology",
    "Psychiatry",
    "Pediatrics",
    "Gynecology",
    "Ophthalmology",
    "Dentistry",
    "Physical Therapy",
]

WEEKDAY_HOURS = {
    "Monday": "9:00 AM - 6:00 PM",
    "Tuesday": "9:00 AM - 6:00 PM",
    "Wednesday": "9:00 AM - 6:00 PM",
    "Thursday": "9:00 AM - 6:00 PM",
    "Friday": "9:00 AM - 5:00 PM",
    "Saturday": "Closed",
    "Sunday": "Closed",
}

PROVIDERS = [
    ProviderCreate(
        name="Dr. Sarah Johnson",
        title="MD",
        specialty="Cardiology",
        profile_image="",
        facility_name="Midtown Medical Center",
        distance=2.3,
        rating=4.5,
        review_count=128,
        next_available="Today, 2:30 PM",
        insurances=["Aetna", "Blue Cross Blue Shield", "Cigna", "Medicare"],
        is_in_network=True,
        has_virtual_visits=False,
        languages=["English", "Spanish"],
        about=(
            "Dr. Sarah Johnson is a board-certified cardiologist with over 10 years of experience "
            "treating patients with various heart conditions. She specializes in preventive cardiology, "
            "heart failure management, and women's heart health."
        ),
        education=[
            Education(
                degree="MD, Johns Hopkins School of Medicine",
                institution="Johns Hopkins University",
                graduation_year="Graduated 2008",
            ),
            Education(
                degree="Cardiology Fellowship, Mount Sinai Hospital",
                institution="Mount Sinai Hospital",
                graduation_year="Completed 2013",
            ),
        ],
        certifications=[
            Certification(
                name="Board Certified in Cardiovascular Disease",
                organization="American Board of Internal Medicine",
            ),
        ],
        office_address=OfficeAddress(
            street="123 Park Avenue, Suite 456",
            city="New York",
            state="NY",
            zip_code="10022",
            latitude=40.7580,
            longitude=-73.9855,
        ),
        office_phone="(212) 555-7890",
        office_hours={
            "Monday": "8:00 AM - 5:00 PM",
            "Tuesday": "8:00 AM - 5:00 PM",
            "Wednesday": "10:00 AM - 7:00 PM",
            "Thursday": "8:00 AM - 5:00 PM",
            "Friday": "8:00 AM - 3:00 PM",
            "Saturday": "9:00 AM - 1:00 PM",
            "Sunday": "Closed",
        },
        accepting_new_patients=True,
        is_spanish_speaking=True,
    ),
    ProviderCreate(
        name="Dr. Michael Chen",
        title="MD",
        specialty="Primary Care",
        profile_image="",
        facility_name="Downtown Medical Group",
        distance=1.8,
        rating=4.0,
        review_count=97,
        next_available="Tomorrow, 9:15 AM",
        insurances=["UnitedHealthcare", "Blue Cross Blue Shield", "Humana", "Medicaid"],
        is_in_network=True,
        has_virtual_visits=True,
        languages=["English", "Mandarin"],
        about=(
            "Dr. Michael Chen is a primary care physician specializing in preventive medicine and "
            "chronic disease management, with a focus on comprehensive care and patient education."
        ),
        education=[
            Education(
                degree="MD, University of California, San Francisco",
                institution="UCSF",
                graduation_year="Graduated 2010",
            ),
            Education(
                degree="Residency in Internal Medicine, Stanford Medical Center",
                institution="Stanford",
                graduation_year="Completed 2013",
            ),
        ],
        certifications=[
            Certification(
                name="Board Certified in Internal Medicine",
                organization="American Board of Internal Medicine",
            ),
        ],
        office_address=OfficeAddress(
            street="456 Broadway, Floor 3",
            city="New York",
            state="NY",
            zip_code="10013",
            latitude=40.7209,
            longitude=-73.9988,
        ),
        office_phone="(212) 555-1234",
        office_hours=WEEKDAY_HOURS,
        accepting_new_patients=True,
        is_spanish_speaking=False,
    ),
    ProviderCreate(
        name="Dr. Alex Rodriguez",
        title="MD",
        specialty="Dermatology",
        profile_image="",
        facility_name="East Village Dermatology",
        distance=3.5,
        rating=5.0,
        review_count=213,
        next_available="Friday, 1:00 PM",
        insurances=["Aetna", "Cigna", "Oscar", "UnitedHealthcare", "Medicare"],
        is_in_network=True,
        has_virtual_visits=True,
        languages=["English", "Spanish"],
        about=(
            "Dr. Alex Rodriguez is a board-certified dermatologist specializing in medical, surgical, "
            "and cosmetic dermatology, treating acne, psoriasis, and skin cancer in patients of all ages."
        ),
        education=[
            Education(
                degree="MD, Columbia University College of Physicians and Surgeons",
                institution="Columbia University",
                graduation_year="Graduated 2009",
            ),
            Education(
                degree="Dermatology Residency, NYU Langone Medical Center",
                institution="NYU",
                graduation_year="Completed 2013",
            ),
        ],
        certifications=[
            Certification(name="Board Certified in Dermatology", organization="American Board of Dermatology"),
            Certification(name="Fellow", organization="American Academy of Dermatology"),
        ],
        office_address=OfficeAddress(
            street="789 2nd Avenue, Suite 301",
            city="New York",
            state="NY",
            zip_code="10003",
            latitude=40.7318,
            longitude=-73.9820,
        ),
        office_phone="(212) 555-4567",
        office_hours={
            "Monday": "8:30 AM - 5:00 PM",
            "Tuesday": "8:30 AM - 5:00 PM",
            "Wednesday": "8:30 AM - 5:00 PM",
            "Thursday": "8:30 AM - 5:00 PM",
            "Friday": "8:30 AM - 3:00 PM",
            "Saturday": "Closed",
            "Sunday": "Closed",
        },
        accepting_new_patients=True,
        is_spanish_speaking=True,
    ),
    ProviderCreate(
        name="Dr. Jennifer Park",
        title="MD",
        specialty="Pediatrics",
        profile_image="",
        facility_name="Upper West Side Pediatrics",
        distance=2.7,
        rating=4.8,
        review_count=156,
        next_available="Monday, 10:00 AM",
        insurances=["Blue Cross Blue Shield", "UnitedHealthcare", "Aetna", "Cigna"],
        is_in_network=True,
        has_virtual_visits=True,
        languages=["English", "Korean"],
        about=(
            "Dr. Jennifer Park is a compassionate pediatrician with a focus on child development, "
            "preventive care, and managing common childhood conditions."
        ),
        education=[
            Education(
                degree="MD, Weill Cornell Medical College",
                institution="Cornell University",
                graduation_year="Graduated 2011",
            ),
            Education(
                degree="Pediatrics Residency, Children's Hospital of Philadelphia",
                institution="UPenn",
                graduation_year="Completed 2014",
            ),
        ],
        certifications=[
            Certification(name="Board Certified in Pediatrics", organization="American Board of Pediatrics"),
        ],
        office_address=OfficeAddress(
            street="125 West 86th Street",
            city="New York",
            state="NY",
            zip_code="10024",
            latitude=40.7867,
            longitude=-73.9754,
        ),
        office_phone="(212) 555-8901",
        office_hours={**WEEKDAY_HOURS, "Saturday": "9:00 AM - 12:00 PM"},
        accepting_new_patients=True,
        is_spanish_speaking=False,
    ),
    ProviderCreate(
        name="Dr. Robert Williams",
        title="MD",
        specialty="Orthopedics",
        profile_image="",
        facility_name="Manhattan Orthopedic Specialists",
        distance=3.1,
        rating=4.6,
        review_count=189,
        next_available="Thursday, 2:00 PM",
        insurances=["Medicare", "Blue Cross Blue Shield", "UnitedHealthcare", "Aetna"],
        is_in_network=True,
        has_virtual_visits=False,
        languages=["English"],
        about=(
            "Dr. Robert Williams is an orthopedic surgeon specializing in sports medicine, joint "
            "replacement, and arthroscopic surgery."
        ),
        education=[
            Education(
                degree="MD, Yale School of Medicine",
                institution="Yale University",
                graduation_year="Graduated 2006",
            ),
            Education(
                degree="Orthopedic Surgery Residency, Hospital for Special Surgery",
                institution="HSS",
                graduation_year="Completed 2011",
            ),
            Education(
                degree="Sports Medicine Fellowship, Andrews Institute",
                institution="Andrews Institute",
                graduation_year="Completed 2012",
            ),
        ],
        certifications=[
            Certification(
                name="Board Certified in Orthopedic Surgery",
                organization="American Board of Orthopedic Surgery",
            ),
            Certification(
                name="Subspecialty Certification in Sports Medicine",
                organization="American Board of Orthopedic Surgery",
            ),
        ],
        office_address=OfficeAddress(
            street="520 East 72nd Street, Suite 250",
            city="New York",
            state="NY",
            zip_code="10021",
            latitude=40.7659,
            longitude=-73.9547,
        ),
        office_phone="(212) 555-3456",
        office_hours={
            "Monday": "8:00 AM - 5:00 PM",
            "Tuesday": "8:00 AM - 5:00 PM",
            "Wednesday": "8:00 AM - 5:00 PM",
            "Thursday": "8:00 AM - 5:00 PM",
            "Friday": "8:00 AM - 3:00 PM",
            "Saturday": "Closed",
            "Sunday": "Closed",
        },
        accepting_new_patients=True,
        is_spanish_speaking=False,
    ),
]
