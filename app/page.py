HOMEPAGE_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1.0"/>
  <title>AssistIQ</title>
  <style>
    body {
      font-family: 'Poppins', sans-serif;
      background: #f8fafc;
      color: #333;
      display: flex;
      flex-direction: column;
      align-items: center;
      padding: 2rem;
    }
    img { max-width: 160px; }
    h1 {
      color: #3B82F6;
      font-size: 2.5rem;
      margin: 1rem 0 0.5rem;
    }
    p { color: #555; font-size: 1.1rem; }
    form {
      margin-top: 2rem;
      width: 100%;
      max-width: 400px;
      background: white;
      padding: 2rem;
      border-radius: 12px;
      box-shadow: 0 4px 12px rgba(0,0,0,0.1);
    }
    input, textarea, button {
      width: 100%;
      margin-bottom: 1rem;
      padding: 0.75rem;
      border: 1px solid #ccc;
      border-radius: 8px;
      font-size: 1rem;
    }
    button {
      background: #3B82F6;
      color: white;
      border: none;
      cursor: pointer;
    }
    .reply {
      background: #e0f7ff;
      padding: 1rem;
      border-radius: 8px;
      margin-top: 1rem;
    }
  </style>
</head>
<body>
  <img src="https://user-gen-media-assets.s3.amazonaws.com/gpt4o_images/ba0b84ef-ebde-43e1-83ee-38a460834d83.png" alt="AssistIQ Logo" />
  <h1>AssistIQ</h1>
  <p><em>Smart Support. Human Touch.</em></p>

  <form id="chatForm">
    <input type="text" name="name" placeholder="Your Name" required />
    <textarea name="message" placeholder="Type your support request here..." required></textarea>
    <button type="submit">Send</button>
  </form>

  <div id="reply" class="reply" style="display:none;"></div>

  <script>
    const form = document.getElementById('chatForm');
    const replyDiv = document.getElementById('reply');

    form.addEventListener('submit', async (e) => {
      e.preventDefault();
      const formData = new FormData(form);
      const res = await fetch('/chat', {
        method: 'POST',
        headers: { 'Content-Type': 'application/json' },
        body: JSON.stringify({
          name: formData.get('name'),
          message: formData.get('message')
        })
      });

      const data = await res.json();
      replyDiv.innerText = data.reply || data.error;
      replyDiv.style.display = 'block';
      form.reset();
    });
  </script>
</body>
</html>
"""
