from coursegate.models import Batch, CourseDraft

# Demo catalogue loaded into an empty database when settings.seed_demo_courses is on.
DEMO_COURSES = [
    CourseDraft(
        title="Morning Energizing Flow",
        description="Start your day with energy and intention through gentle flowing movements.",
        content="This course covers morning yoga practices to energize your body and mind...",
        video_id="dQw4w9WgXcQ",
        duration=60,
        languages=["english", "hindi"],
        batches=[
            Batch("Batch 1", "07:00", ["Monday", "Wednesday", "Friday"]),
            Batch("Batch 2", "18:00", ["Tuesday", "Thursday"]),
        ],
    ),
    CourseDraft(
        title="प्राणायाम अभ्यास (Pranayama Practice)",
        description="श्वास नियंत्रण के माध्यम से अपनी जीवन शक्ति का विस्तार करें।",
        content="इस पाठ्यक्रम में, हम विभिन्न प्राणायाम तकनीकों का अभ्यास करेंगे...",
        video_id="inpok4MKVLM",
        duration=60,
        languages=["hindi"],
        batches=[
            Batch("Morning Batch", "07:00", ["Monday", "Wednesday", "Friday"]),
            Batch("Evening Batch", "18:00", ["Tuesday", "Thursday"]),
        ],
    ),
    CourseDraft(
        title="ಧ್ಯಾನ ಅಭ್ಯಾಸ (Meditation Practice)",
        description="ಮಾರ್ಗದರ್ಶಿತ ಧ್ಯಾನದ ಮೂಲಕ ಮನಸ್ಸಿನ ಶಾಂತಿ ಮತ್ತು ಸ್ಪಷ್ಟತೆಯನ್ನು ಕಂಡುಕೊಳ್ಳಿ.",
        content="ಈ ಕೋರ್ಸ್‌ನಲ್ಲಿ, ನಾವು ವಿವಿಧ ಧ್ಯಾನ ತಂತ್ರಗಳನ್ನು ಅಭ್ಯಾಸ ಮಾಡುತ್ತೇವೆ...",
        video_id="86m4RC_ADEY",
        duration=60,
        languages=["kannada", "english"],
        batches=[
            Batch("Beginner Batch", "07:00", ["Monday", "Wednesday", "Friday"]),
            Batch("Advanced Batch", "19:30", ["Tuesday", "Thursday", "Saturday"]),
        ],
    ),
]
