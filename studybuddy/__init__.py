"""StudyBuddy backend: courses, notes, PDFs, planner and AI quizzes."""
